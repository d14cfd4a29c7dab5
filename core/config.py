"""스캔 설정 모델(KR). Scan configuration models (EN)."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from recentscan.scanner import ScanRequest

from .errors import SettingsError


def _default_root() -> Path:
    """사용자 폴더 상위 경로 · Directory holding the user profiles."""

    return Path.home().parent


class ScanSettings(BaseModel):
    """스캔 기본값 전체를 표현 · Represent default scan settings."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    root: Path = Field(default_factory=_default_root)
    pattern: str = "*.*"
    skip_system_folder: bool = True
    system_folder_name: str = "Windows"
    lookback_days: int | None = Field(default=7, ge=0)
    flush_interval: float = Field(default=1.0, gt=0)
    follow_symlinks: bool = False

    @classmethod
    def from_file(cls, config_file: Path) -> "ScanSettings":
        """설정 파일에서 로드 · Load settings from config file."""

        source = str(config_file)
        try:
            data = (
                yaml.safe_load(config_file.read_text(encoding="utf-8"))
                if config_file.exists()
                else {}
            )
        except yaml.YAMLError as exc:
            raise SettingsError(f"invalid YAML: {exc}", source=source) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError("configuration file must contain a mapping", source=source)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(str(exc), source=source) from exc

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump())

    def build_request(
        self,
        *,
        root: Path | None = None,
        pattern: str | None = None,
        skip_system_folder: bool | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        lookback_days: int | None = None,
        now: datetime | None = None,
    ) -> ScanRequest:
        """재정의 값을 병합해 요청 생성 · Merge overrides into a scan request."""

        days = lookback_days if lookback_days is not None else self.lookback_days
        if date_from is None and days is not None:
            date_from = (now or datetime.now()) - timedelta(days=days)
        resolved_root = Path(root if root is not None else self.root).expanduser().resolve()
        return ScanRequest(
            root=str(resolved_root),
            pattern=pattern or self.pattern,
            skip_system_folder=(
                self.skip_system_folder if skip_system_folder is None else skip_system_folder
            ),
            date_from=date_from,
            date_to=date_to,
        )


__all__ = ["ScanSettings"]
