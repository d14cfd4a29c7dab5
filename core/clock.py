'''시각 유틸리티(KR). Local time utilities (EN).'''

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def local_now() -> str:
    '''로컬 기준 현재 시각을 ISO8601로 반환 · Return local now as ISO8601.'''

    return datetime.now().astimezone().isoformat(timespec='seconds')


def format_timestamp(mtime: float) -> str:
    '''POSIX 초를 로컬 시각 문자열로 변환 · Render POSIX seconds as local time text.'''

    return datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> float:
    '''로컬 시각 문자열을 POSIX 초로 변환 · Parse local time text into POSIX seconds.'''

    return datetime.strptime(text.strip(), TIMESTAMP_FORMAT).timestamp()


__all__ = ['TIMESTAMP_FORMAT', 'format_timestamp', 'local_now', 'parse_timestamp']
