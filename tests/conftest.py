"""Shared pytest configuration and path setup for test modules."""

import dataclasses
import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from reasonlib.core.utils import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 全局 RuntimeConfig 是单例：每个测试结束后恢复原值，避免用例之间相互污染
    snapshot = dataclasses.asdict(get_config())
    yield
    get_config().update(**snapshot)
