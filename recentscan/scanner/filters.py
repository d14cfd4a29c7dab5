"""일치 필터 체인./Match filter chain applied to walker output."""

from __future__ import annotations

import os
from datetime import datetime

from .exceptions import MetadataReadError
from .models import FileMetadata, FileRecord, MetadataSource, ScanRequest

DEFAULT_SYSTEM_FOLDER = "Windows"


class OsMetadataSource:
    """os.stat 기반 메타데이터 소스./Metadata source backed by os.stat."""

    def read(self, path: str) -> FileMetadata:
        stat_result = os.stat(path)
        return FileMetadata(mtime=stat_result.st_mtime, size=int(stat_result.st_size))


def _to_timestamp(value: datetime | None) -> float | None:
    if value is None:
        return None
    return value.timestamp()


class MatchFilter:
    """시스템 폴더와 날짜 범위로 경로를 거릅니다./Filter paths by system folder and date range."""

    def __init__(
        self,
        request: ScanRequest,
        metadata_source: MetadataSource,
        system_folder_name: str = DEFAULT_SYSTEM_FOLDER,
    ) -> None:
        self._metadata = metadata_source
        self._excluded_prefix: str | None = None
        if request.skip_system_folder:
            prefix = os.path.join(request.root, system_folder_name)
            self._excluded_prefix = prefix.casefold()
        self._lower = _to_timestamp(request.date_from)
        self._upper = _to_timestamp(request.date_to)

    def is_excluded(self, path: str) -> bool:
        """제외 하위 트리 여부./Return True if path sits in the excluded subtree."""

        if self._excluded_prefix is None:
            return False
        return path.casefold().startswith(self._excluded_prefix)

    def in_range(self, mtime: float) -> bool:
        """수정 시각이 범위 안인지./Return True if mtime is inside the bounds."""

        if self._lower is not None and mtime < self._lower:
            return False
        if self._upper is not None and mtime > self._upper:
            return False
        return True

    def accept(self, path: str) -> FileRecord | None:
        """통과하면 레코드를 반환./Return a record when the path passes every filter."""

        if self.is_excluded(path):
            return None
        try:
            metadata = self._metadata.read(path)
        except OSError as exc:
            raise MetadataReadError(path, str(exc)) from exc
        if not self.in_range(metadata.mtime):
            return None
        return FileRecord(path=path, mtime=metadata.mtime, size=metadata.size)
