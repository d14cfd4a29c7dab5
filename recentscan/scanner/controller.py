"""스캔 수명주기 컨트롤러./Scan lifecycle controller."""

from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import replace
from typing import Callable

from .exceptions import ScanCancelledError
from .filters import DEFAULT_SYSTEM_FOLDER, MatchFilter, OsMetadataSource
from .models import (
    AbortCallback,
    BatchCallback,
    CompletionCallback,
    ErrorCallback,
    FileRecord,
    MetadataSource,
    ScanBatch,
    ScanRequest,
)
from .session import ScanSession
from .walker import DirectoryLister, DirectoryWalker, OsDirectoryLister

__all__ = ["ScanController"]

logger = logging.getLogger(__name__)


class ScanController:
    """백그라운드 스레드 하나로 스캔을 실행합니다./Run one scan at a time on a background thread.

    Callbacks are invoked synchronously on the scan thread. Consumers that
    need them on another thread (a UI loop, the CLI main thread) must
    marshal them themselves.
    """

    def __init__(
        self,
        *,
        lister: DirectoryLister | None = None,
        metadata_source: MetadataSource | None = None,
        flush_interval: float = 1.0,
        system_folder_name: str = DEFAULT_SYSTEM_FOLDER,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if flush_interval <= 0:
            raise ValueError("flush_interval must be positive")
        self._lister = lister if lister is not None else OsDirectoryLister()
        self._metadata = metadata_source if metadata_source is not None else OsMetadataSource()
        self._flush_interval = flush_interval
        self._system_folder_name = system_folder_name
        self._clock = clock
        self._lock = threading.Lock()
        self._session: ScanSession | None = None
        self._results: list[FileRecord] = []

    @property
    def is_running(self) -> bool:
        """활성 세션 여부./Return True while a scan thread is alive."""

        session = self._session
        return session is not None and session.thread is not None and session.thread.is_alive()

    @property
    def results(self) -> list[FileRecord]:
        """전달된 레코드 사본./Copy of every record delivered by the latest session."""

        return list(self._results)

    def start(
        self,
        request: ScanRequest,
        on_batch: BatchCallback,
        on_aborted: AbortCallback | None = None,
        on_error: ErrorCallback | None = None,
        on_completed: CompletionCallback | None = None,
    ) -> bool:
        """새 세션을 시작합니다./Start a new session; no-op while one is active."""

        with self._lock:
            if self.is_running:
                logger.debug("scan already running, start ignored")
                return False
            session = ScanSession(
                request=request,
                flush_interval=self._flush_interval,
                clock=self._clock,
            )
            self._results = []
            session.thread = threading.Thread(
                target=self._run,
                args=(session, on_batch, on_aborted, on_error, on_completed),
                name="recentscan-scan",
                daemon=True,
            )
            self._session = session
            logger.info(
                "scan started root=%s pattern=%s skip_system=%s",
                request.root,
                request.pattern,
                request.skip_system_folder,
            )
            session.thread.start()
        return True

    def stop(self) -> None:
        """취소 후 스레드 종료까지 대기./Cancel the session and join its thread."""

        with self._lock:
            session = self._session
        if session is None or session.thread is None:
            return
        session.token.cancel()
        if session.thread is threading.current_thread():
            return
        session.thread.join()

    def wait(self, timeout: float | None = None) -> bool:
        """자연 종료를 기다립니다./Wait for the session to finish; True if it did."""

        session = self._session
        if session is None or session.thread is None:
            return True
        session.thread.join(timeout)
        return not session.thread.is_alive()

    def _run(
        self,
        session: ScanSession,
        on_batch: BatchCallback,
        on_aborted: AbortCallback | None,
        on_error: ErrorCallback | None,
        on_completed: CompletionCallback | None,
    ) -> None:
        root = os.path.abspath(os.fspath(session.request.root))
        request = replace(session.request, root=root)
        walker = DirectoryWalker(self._lister, session.record_skip)
        match_filter = MatchFilter(request, self._metadata, self._system_folder_name)
        session.begin()
        try:
            for path in walker.iter_files(root, request.pattern, session.token.is_cancelled):
                session.discovered += 1
                record = match_filter.accept(path)
                if record is not None:
                    session.add(record)
                now = self._clock()
                if session.should_flush(now):
                    self._deliver(session.drain(now), on_batch)
            session.token.raise_if_cancelled()
            now = self._clock()
            if session.buffer:
                self._deliver(session.drain(now), on_batch)
        except ScanCancelledError:
            logger.info(
                "scan aborted root=%s delivered=%d dropped=%d",
                root,
                len(self._results),
                len(session.buffer),
            )
            self._notify("on_aborted", on_aborted)
        except Exception as exc:
            logger.exception("scan failed root=%s", root)
            self._notify("on_error", on_error, exc)
        else:
            statistics = session.final_statistics(self._clock())
            logger.info(
                "scan completed root=%s matched=%d batches=%d skipped=%d",
                root,
                statistics.matched,
                statistics.batches,
                statistics.skipped_directories,
            )
            self._notify("on_completed", on_completed, statistics)

    @staticmethod
    def _notify(name: str, callback: Callable[..., None] | None, *args: object) -> None:
        """종료 콜백을 호출하고 실패를 기록./Invoke a terminal callback and log its failure."""

        if callback is None:
            return
        try:
            callback(*args)
        except Exception:
            logger.exception("%s callback raised", name)

    def _deliver(self, batch: ScanBatch, on_batch: BatchCallback) -> None:
        self._results.extend(batch.records)
        logger.debug("delivering batch %d with %d records", batch.sequence, len(batch.records))
        on_batch(batch)
