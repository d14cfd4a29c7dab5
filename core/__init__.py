"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .clock import format_timestamp, local_now, parse_timestamp
from .config import ScanSettings
from .errors import SettingsError
from .logging import configure_logging

__all__ = [
    "ScanSettings",
    "SettingsError",
    "configure_logging",
    "format_timestamp",
    "local_now",
    "parse_timestamp",
]
