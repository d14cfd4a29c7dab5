"""디렉터리 순회 도우미./Directory walking helpers."""

from __future__ import annotations

import fnmatch
import logging
import os
from typing import Callable, Iterator, Protocol

from .exceptions import ScanCancelledError

ErrorReporter = Callable[[str, OSError], None]
CancelCheck = Callable[[], bool]

logger = logging.getLogger(__name__)

_MATCH_ALL = frozenset({"*", "*.*"})


def matches_pattern(name: str, pattern: str) -> bool:
    """파일명이 글롭 패턴과 일치하는지 판정./Return True if name matches glob."""

    if pattern in _MATCH_ALL:
        return True
    return fnmatch.fnmatch(name, pattern)


class DirectoryLister(Protocol):
    """디렉터리 목록 제공자./Provider of directory listings."""

    def list_files(self, directory: str, pattern: str) -> list[str]:
        ...

    def list_directories(self, directory: str) -> list[str]:
        ...


class OsDirectoryLister:
    """os.scandir 기반 목록 구현./Directory listing backed by os.scandir.

    Symlinked files are always listed; ``follow_symlinks`` only controls
    descent into symlinked directories.
    """

    def __init__(self, follow_symlinks: bool = False) -> None:
        self._follow = follow_symlinks

    def list_files(self, directory: str, pattern: str) -> list[str]:
        files: list[str] = []
        with os.scandir(directory) as iterator:
            for entry in iterator:
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                if matches_pattern(entry.name, pattern):
                    files.append(entry.path)
        return files

    def list_directories(self, directory: str) -> list[str]:
        directories: list[str] = []
        with os.scandir(directory) as iterator:
            for entry in iterator:
                try:
                    if entry.is_dir(follow_symlinks=self._follow):
                        directories.append(entry.path)
                except OSError:
                    continue
        return directories


class DirectoryWalker:
    """명시적 스택으로 파일을 순회합니다./Walk files with an explicit stack.

    Listing failures skip only the affected directory. Cancellation is
    polled before each directory visit, each yielded file and each pushed
    subdirectory, and surfaces as :class:`ScanCancelledError`.
    """

    def __init__(
        self,
        lister: DirectoryLister | None = None,
        report_error: ErrorReporter | None = None,
    ) -> None:
        self._lister = lister if lister is not None else OsDirectoryLister()
        self._report_error = report_error

    def iter_files(self, root: str, pattern: str, cancel_check: CancelCheck) -> Iterator[str]:
        """파일 경로를 생성합니다./Yield file paths under root."""

        pending: list[str] = [root]
        while pending:
            current = pending.pop()
            self._check(cancel_check)
            unreadable = False
            try:
                files = self._lister.list_files(current, pattern)
            except OSError as exc:
                self._skip(current, exc)
                unreadable = True
                files = []
            for path in files:
                self._check(cancel_check)
                yield path
            try:
                subdirectories = self._lister.list_directories(current)
            except OSError as exc:
                if not unreadable:
                    self._skip(current, exc)
                continue
            for subdirectory in subdirectories:
                self._check(cancel_check)
                pending.append(subdirectory)

    @staticmethod
    def _check(cancel_check: CancelCheck) -> None:
        if cancel_check():
            raise ScanCancelledError("scan cancelled")

    def _skip(self, directory: str, error: OSError) -> None:
        logger.debug("skipping unreadable directory %s: %s", directory, error)
        if self._report_error is not None:
            self._report_error(directory, error)
