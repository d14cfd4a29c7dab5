"""설정 로드와 요청 생성을 검증합니다./Validate settings loading and request building."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from core import ScanSettings, SettingsError, configure_logging


def test_defaults_match_original_behaviour() -> None:
    """기본값을 확인합니다./Check default settings."""

    settings = ScanSettings()
    assert settings.pattern == "*.*"
    assert settings.skip_system_folder is True
    assert settings.system_folder_name == "Windows"
    assert settings.lookback_days == 7
    assert settings.flush_interval == 1.0
    assert settings.root == Path.home().parent


def test_from_file_reads_yaml(tmp_path: Path) -> None:
    """YAML 파일을 읽습니다./Load settings from YAML."""

    config_file = tmp_path / "recentscan.yml"
    config_file.write_text(
        "pattern: '*.log'\nlookback_days: 2\nflush_interval: 0.5\nunknown: ignored\n",
        encoding="utf-8",
    )
    settings = ScanSettings.from_file(config_file)
    assert settings.pattern == "*.log"
    assert settings.lookback_days == 2
    assert settings.flush_interval == 0.5


def test_missing_or_empty_file_yields_defaults(tmp_path: Path) -> None:
    """없는/빈 파일은 기본값입니다./Missing or empty files give defaults."""

    assert ScanSettings.from_file(tmp_path / "absent.yml") == ScanSettings()
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert ScanSettings.from_file(empty) == ScanSettings()


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "flush_interval: 0\n", "lookback_days: -1\n", "pattern: [unclosed\n"],
)
def test_invalid_files_raise_settings_error(tmp_path: Path, content: str) -> None:
    """잘못된 설정은 SettingsError 입니다./Invalid settings raise SettingsError."""

    config_file = tmp_path / "bad.yml"
    config_file.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsError) as excinfo:
        ScanSettings.from_file(config_file)
    assert str(config_file) in str(excinfo.value)


def test_build_request_applies_lookback(tmp_path: Path) -> None:
    """기본 조회 기간을 적용합니다./Apply the default lookback window."""

    now = datetime(2024, 6, 15, 12, 0)
    settings = ScanSettings(root=tmp_path, lookback_days=7)
    request = settings.build_request(now=now)
    assert request.root == str(tmp_path.resolve())
    assert request.date_from == now - timedelta(days=7)
    assert request.date_to is None
    assert request.pattern == "*.*"


def test_build_request_overrides(tmp_path: Path) -> None:
    """재정의 값이 우선합니다./Overrides take precedence."""

    explicit = datetime(2024, 1, 1)
    settings = ScanSettings(root=tmp_path / "ignored")
    request = settings.build_request(
        root=tmp_path,
        pattern="*.txt",
        skip_system_folder=False,
        date_from=explicit,
        date_to=explicit + timedelta(days=1),
        lookback_days=1,
    )
    assert request.root == str(tmp_path.resolve())
    assert request.pattern == "*.txt"
    assert request.skip_system_folder is False
    assert request.date_from == explicit
    assert request.date_to == explicit + timedelta(days=1)


def test_build_request_without_lookback(tmp_path: Path) -> None:
    """조회 기간이 없으면 하한도 없습니다./No lookback means no lower bound."""

    request = ScanSettings(root=tmp_path, lookback_days=None).build_request()
    assert request.date_from is None


def test_configure_logging_writes_json(tmp_path: Path) -> None:
    """JSON 로그를 기록합니다./Write JSON log lines."""

    log_file = tmp_path / "logs" / "scan.log"
    configure_logging(log_file, level="debug")
    logging.getLogger("recentscan.scanner.controller").info("hello %s", "world")
    for handler in logging.getLogger("recentscan").handlers:
        handler.flush()
    entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert entries[-1]["message"] == "hello world"
    assert entries[-1]["level"] == "INFO"
    assert entries[-1]["name"] == "recentscan.scanner.controller"
