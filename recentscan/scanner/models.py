"""스캐너 데이터 모델 정의./Define scanner data models."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Protocol

from .exceptions import ScanCancelledError

BatchCallback = Callable[["ScanBatch"], None]
AbortCallback = Callable[[], None]
ErrorCallback = Callable[[BaseException], None]
CompletionCallback = Callable[["ScanStatistics"], None]


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """한 번의 스캔 요청./Parameters of a single scan."""

    root: str
    pattern: str = "*.*"
    skip_system_folder: bool = True
    date_from: datetime | None = None
    date_to: datetime | None = None


@dataclass(slots=True)
class CancellationToken:
    """외부 취소 신호를 전달합니다./Carry cancellation signals across threads."""

    _event: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    def cancel(self) -> None:
        """취소 상태로 설정합니다./Mark token as cancelled."""

        self._event.set()

    def is_cancelled(self) -> bool:
        """취소 여부를 반환합니다./Return cancellation flag."""

        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """취소되었으면 예외를 발생./Raise when the token was cancelled."""

        if self._event.is_set():
            raise ScanCancelledError("scan cancelled")


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """메타데이터 소스의 결과./Result of a metadata lookup."""

    mtime: float
    size: int


class MetadataSource(Protocol):
    """파일 메타데이터 제공자./Provider of file metadata."""

    def read(self, path: str) -> FileMetadata:
        ...


@dataclass(frozen=True, slots=True)
class FileRecord:
    """일치한 단일 파일 메타./Metadata for a matched file."""

    path: str
    mtime: float
    size: int

    @property
    def modified(self) -> datetime:
        """로컬 수정 시각./Local last-modified time."""

        return datetime.fromtimestamp(self.mtime)


@dataclass(slots=True)
class ProgressStats:
    """스캔 진행 통계./Scan progress statistics."""

    discovered: int
    matched: int
    skipped_directories: int
    elapsed_seconds: float


@dataclass(slots=True)
class ScanBatch:
    """배치 결과와 통계를 포함./Contain batch results and stats."""

    sequence: int
    records: list[FileRecord]
    stats: ProgressStats


@dataclass(slots=True)
class ScanStatistics:
    """전체 스캔 요약 통계./Overall scan statistics."""

    discovered: int
    matched: int
    batches: int
    skipped_directories: int
    duration_seconds: float
