"""탭 구분 내보내기 유틸리티./Tab-separated export utilities."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Iterable, Optional, Type

from core.clock import format_timestamp, parse_timestamp

from ..scanner.models import FileRecord


def format_record(record: FileRecord) -> str:
    """레코드를 한 줄로 변환합니다./Render a record as one export line."""

    return "\t".join((record.path, format_timestamp(record.mtime), str(record.size)))


class TabSeparatedWriter:
    """레코드를 줄 단위로 스트리밍 기록./Stream-write records as TSV lines."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = path.open("w", encoding="utf-8", newline="\n")
        self.count = 0

    def write(self, record: FileRecord) -> None:
        """단일 레코드를 추가합니다./Append a single record."""

        self._handle.write(format_record(record))
        self._handle.write("\n")
        self.count += 1

    def close(self) -> None:
        """스트림을 종료합니다./Close the underlying stream."""

        self._handle.close()

    def __enter__(self) -> "TabSeparatedWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def export_records(records: Iterable[FileRecord], path: Path) -> int:
    """레코드 전체를 파일로 기록합니다./Write every record to path."""

    with TabSeparatedWriter(path) as writer:
        for record in records:
            writer.write(record)
    return writer.count


def load_records(path: Path) -> list[FileRecord]:
    """내보낸 파일을 다시 읽습니다./Load records from an export file."""

    records: list[FileRecord] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        file_path, timestamp, size = line.rsplit("\t", 2)
        records.append(
            FileRecord(path=file_path, mtime=parse_timestamp(timestamp), size=int(size))
        )
    return records


__all__ = ["TabSeparatedWriter", "export_records", "format_record", "load_records"]
