"""스캐너 전용 예외를 정의합니다./Define scanner specific exceptions."""

from __future__ import annotations


class ScanErrorBase(RuntimeError):
    """스캔 중 발생한 오류 기본 클래스./Base class for scan errors."""


class ScanCancelledError(ScanErrorBase):
    """취소 토큰으로 스캔이 중단됨./Scan stopped by cancellation token."""


class MetadataReadError(ScanErrorBase):
    """일치 파일의 메타데이터를 읽지 못함./Metadata of a matched file is unreadable."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
