"""취소 가능한 배치 파일 스캐너 API./Cancellable batched file scanner API."""

from __future__ import annotations

from .controller import ScanController
from .exceptions import MetadataReadError, ScanCancelledError, ScanErrorBase
from .filters import MatchFilter, OsMetadataSource
from .models import (
    CancellationToken,
    FileMetadata,
    FileRecord,
    MetadataSource,
    ProgressStats,
    ScanBatch,
    ScanRequest,
    ScanStatistics,
)
from .walker import DirectoryLister, DirectoryWalker, OsDirectoryLister, matches_pattern

__all__ = [
    "CancellationToken",
    "DirectoryLister",
    "DirectoryWalker",
    "FileMetadata",
    "FileRecord",
    "MatchFilter",
    "MetadataReadError",
    "MetadataSource",
    "OsDirectoryLister",
    "OsMetadataSource",
    "ProgressStats",
    "ScanBatch",
    "ScanCancelledError",
    "ScanController",
    "ScanErrorBase",
    "ScanRequest",
    "ScanStatistics",
    "matches_pattern",
]
