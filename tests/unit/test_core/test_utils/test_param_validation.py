"""
Unit tests for validation helpers.
"""
# 说明：参数验证工具（ensure / ensure_type / ensure_finite）的单元测试。
# 覆盖：
# - ensure：在条件为真时静默通过，条件为假时抛出指定异常
# - ensure_type：检查值是否属于给定类型集合，否则抛出带 label 的 ParamValidationError
# - ensure_finite：转换为有限浮点数，拒绝 NaN / inf / bool / 不可转换类型

import math

import pytest

from reasonlib.core.utils import ParamValidationError, ensure, ensure_finite, ensure_type


def test_ensure_passes_and_fails() -> None:
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError):
        ensure(False, "error")


def test_ensure_uses_custom_error() -> None:
    with pytest.raises(KeyError):
        ensure(False, "missing", error=KeyError)


def test_ensure_type_checks() -> None:
    ensure_type(5, (int,), label="value")
    with pytest.raises(ParamValidationError, match="value must be instance of int"):
        ensure_type("text", (int,), label="value")


def test_ensure_finite_converts() -> None:
    assert ensure_finite(3) == 3.0
    assert ensure_finite("0.25") == 0.25


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, None, "abc", True])
def test_ensure_finite_rejects(bad) -> None:
    with pytest.raises(ParamValidationError):
        ensure_finite(bad, label="x")
