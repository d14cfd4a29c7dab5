'''KR: 테스트 공용 픽스처. EN: Shared pytest fixtures.'''

from __future__ import annotations

import time
from pathlib import Path

import pytest

from tests.fixtures.virtual_fs import FakeFileSystem, create_virtual_tree

DAY = 24 * 60 * 60


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    '''메모리 파일 시스템을 제공한다(KR). Provide an in-memory filesystem (EN).'''

    return FakeFileSystem()


@pytest.fixture
def recent_tree(tmp_path: Path) -> Path:
    '''최근/오래된/시스템 파일 트리를 구성한다(KR). Build a tree of recent, old and system files (EN).'''

    root = tmp_path / 'root'
    now = time.time()
    create_virtual_tree(root, {'a.txt': 'alpha', 'docs/b.txt': 'beta'}, mtime=now)
    create_virtual_tree(root, {'old.txt': 'old'}, mtime=now - 30 * DAY)
    create_virtual_tree(root, {'Windows/system.txt': 'sys'}, mtime=now)
    create_virtual_tree(root, {'notes.md': 'md'}, mtime=now)
    return root
