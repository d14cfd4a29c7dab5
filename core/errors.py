"""설정 예외 정의(KR). Settings exception definitions (EN)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SettingsError(Exception):
    """설정 로드 실패를 표현 · Represent a configuration failure."""

    message: str
    source: str | None = None

    def __str__(self) -> str:
        """사람 친화적 메시지를 생성 · Build human friendly message."""

        if self.source:
            return f"[{self.source}] {self.message}"
        return self.message


__all__ = ["SettingsError"]
