"""일치 필터 체인을 검증합니다./Validate the match filter chain."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from recentscan.scanner import MatchFilter, MetadataReadError, ScanRequest
from tests.fixtures.virtual_fs import FakeFileSystem

NOW = datetime(2024, 6, 15, 12, 0, 0)


def _request(fake_fs: FakeFileSystem, **kwargs: object) -> ScanRequest:
    return ScanRequest(root=fake_fs.root, **kwargs)  # type: ignore[arg-type]


def test_system_folder_is_excluded_case_insensitively(fake_fs: FakeFileSystem) -> None:
    """시스템 폴더는 대소문자 무시로 제외됩니다./System folder exclusion ignores case."""

    upper = fake_fs.add_file("Windows/a.txt")
    lower = fake_fs.add_file("windows/b.txt")
    other = fake_fs.add_file("Users/c.txt")
    match_filter = MatchFilter(_request(fake_fs, skip_system_folder=True), fake_fs)
    assert match_filter.accept(upper) is None
    assert match_filter.accept(lower) is None
    assert match_filter.accept(other) is not None


def test_system_folder_kept_when_flag_off(fake_fs: FakeFileSystem) -> None:
    """플래그가 꺼지면 포함됩니다./Files are kept when the flag is off."""

    path = fake_fs.add_file("Windows/a.txt", size=42)
    match_filter = MatchFilter(_request(fake_fs, skip_system_folder=False), fake_fs)
    record = match_filter.accept(path)
    assert record is not None
    assert record.path == path
    assert record.size == 42


def test_excluded_path_skips_metadata_read(fake_fs: FakeFileSystem) -> None:
    """제외 경로는 메타데이터를 읽지 않습니다./Excluded paths never hit the metadata source."""

    path = fake_fs.add_file("Windows/a.txt")
    MatchFilter(_request(fake_fs), fake_fs).accept(path)
    assert fake_fs.reads == 0


def test_custom_system_folder_name(fake_fs: FakeFileSystem) -> None:
    """시스템 폴더 이름을 바꿀 수 있습니다./The system folder name is configurable."""

    path = fake_fs.add_file("System32/a.txt")
    match_filter = MatchFilter(_request(fake_fs), fake_fs, system_folder_name="System32")
    assert match_filter.accept(path) is None


@pytest.mark.parametrize(
    ("age_days", "date_from", "date_to", "accepted"),
    [
        (1, NOW - timedelta(days=7), None, True),
        (30, NOW - timedelta(days=7), None, False),
        (30, None, NOW - timedelta(days=7), True),
        (1, None, NOW - timedelta(days=7), False),
        (3, NOW - timedelta(days=7), NOW - timedelta(days=2), True),
        (1, NOW - timedelta(days=7), NOW - timedelta(days=2), False),
        (1, None, None, True),
    ],
)
def test_date_range(
    fake_fs: FakeFileSystem,
    age_days: int,
    date_from: datetime | None,
    date_to: datetime | None,
    accepted: bool,
) -> None:
    """날짜 범위를 적용합니다./Apply the modification date range."""

    mtime = (NOW - timedelta(days=age_days)).timestamp()
    path = fake_fs.add_file("a.txt", mtime=mtime)
    request = _request(fake_fs, date_from=date_from, date_to=date_to)
    assert (MatchFilter(request, fake_fs).accept(path) is not None) is accepted


def test_date_bounds_are_inclusive(fake_fs: FakeFileSystem) -> None:
    """경계 값은 포함됩니다./Both bounds are inclusive."""

    path = fake_fs.add_file("a.txt", mtime=NOW.timestamp())
    request = _request(fake_fs, date_from=NOW, date_to=NOW)
    assert MatchFilter(request, fake_fs).accept(path) is not None


def test_inverted_range_matches_nothing(fake_fs: FakeFileSystem) -> None:
    """뒤집힌 범위는 아무것도 일치하지 않습니다./An inverted range matches nothing."""

    path = fake_fs.add_file("a.txt", mtime=NOW.timestamp())
    request = _request(fake_fs, date_from=NOW + timedelta(days=1), date_to=NOW - timedelta(days=1))
    assert MatchFilter(request, fake_fs).accept(path) is None


def test_metadata_failure_is_wrapped(fake_fs: FakeFileSystem) -> None:
    """메타데이터 오류를 감쌉니다./Metadata failures become MetadataReadError."""

    path = fake_fs.add_file("gone.txt")
    fake_fs.remove_metadata(path)
    with pytest.raises(MetadataReadError) as excinfo:
        MatchFilter(_request(fake_fs), fake_fs).accept(path)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
