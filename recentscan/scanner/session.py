"""스캔 세션 상태 추적기./Track the state of one scan session."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable

from .models import (
    CancellationToken,
    FileRecord,
    ProgressStats,
    ScanBatch,
    ScanRequest,
    ScanStatistics,
)

Clock = Callable[[], float]


@dataclass(slots=True)
class ScanSession:
    """스캔 진행 상황을 저장합니다./Store ongoing scan state and batch buffer."""

    request: ScanRequest
    flush_interval: float
    clock: Clock = time.monotonic
    token: CancellationToken = field(default_factory=CancellationToken)
    thread: threading.Thread | None = None
    buffer: list[FileRecord] = field(default_factory=list)
    start_time: float = 0.0
    last_flush_time: float = 0.0
    discovered: int = 0
    matched: int = 0
    batches: int = 0
    skipped_directories: int = 0

    def begin(self) -> None:
        """배치 타이머를 시작합니다./Start the batch timer."""

        now = self.clock()
        self.start_time = now
        self.last_flush_time = now

    def add(self, record: FileRecord) -> None:
        """일치 레코드를 버퍼에 추가./Buffer a matched record."""

        self.buffer.append(record)
        self.matched += 1

    def record_skip(self, directory: str, error: OSError) -> None:
        """건너뛴 디렉터리를 집계./Count a directory that could not be listed."""

        del directory, error
        self.skipped_directories += 1

    def should_flush(self, now: float) -> bool:
        """배치 방출 여부를 결정합니다./Decide if the buffer is due for delivery."""

        return bool(self.buffer) and now - self.last_flush_time > self.flush_interval

    def drain(self, now: float) -> ScanBatch:
        """버퍼를 배치로 비우고 타이머를 재시작./Turn the buffer into a batch and restart the timer."""

        self.batches += 1
        batch = ScanBatch(sequence=self.batches, records=self.buffer, stats=self.snapshot(now))
        self.buffer = []
        self.last_flush_time = now
        return batch

    def snapshot(self, now: float) -> ProgressStats:
        """현재 통계를 계산합니다./Build a snapshot of current stats."""

        return ProgressStats(
            discovered=self.discovered,
            matched=self.matched,
            skipped_directories=self.skipped_directories,
            elapsed_seconds=round(max(now - self.start_time, 0.0), 2),
        )

    def final_statistics(self, now: float) -> ScanStatistics:
        """최종 통계를 생성합니다./Produce final aggregate statistics."""

        snapshot = self.snapshot(now)
        return ScanStatistics(
            discovered=snapshot.discovered,
            matched=snapshot.matched,
            batches=self.batches,
            skipped_directories=snapshot.skipped_directories,
            duration_seconds=snapshot.elapsed_seconds,
        )
