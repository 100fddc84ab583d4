"""
Unit tests for numerical utilities.
"""
# 说明：数值工具函数的单元测试。
# 覆盖：
# - approx_equal：严格小于容差才视为相等，且该关系不具有传递性
# - is_integral：以最近整数为参照判断，整数两侧的微小偏差都能识别
# - exact_sum：求和结果与顺序无关
# - triples_to_array：输出形状与 dtype，空输入仍保持二维

import numpy as np

from reasonlib.core.utils import approx_equal, exact_sum, is_integral, triples_to_array

EPS = 1e-10


def test_approx_equal_is_strict() -> None:
    assert approx_equal(1.0, 1.0 + 0.5 * EPS, EPS)
    assert not approx_equal(0.0, 2 * EPS, EPS)


def test_approx_equal_is_not_transitive() -> None:
    # 容差相等不具有传递性：a≈b、b≈c 并不意味着 a≈c
    a = 1.0
    b = a + 0.6 * EPS
    c = b + 0.6 * EPS
    assert approx_equal(a, b, EPS)
    assert approx_equal(b, c, EPS)
    assert not approx_equal(a, c, EPS)


def test_is_integral_on_both_sides_of_integer() -> None:
    assert is_integral(3.0, EPS)
    assert is_integral(3 + 0.1 * EPS, EPS)
    assert is_integral(3 - 0.1 * EPS, EPS)
    assert is_integral(-2.0, EPS)
    assert not is_integral(1.5, EPS)


def test_exact_sum_is_order_independent() -> None:
    values = [0.1] * 10
    assert exact_sum(values) == 1.0
    assert exact_sum([1e16, 1.0, -1e16]) == exact_sum([1.0, 1e16, -1e16]) == 1.0


def test_triples_to_array_shapes() -> None:
    arr = triples_to_array([(0, 1, 0.5), (1, 2, 0.5)])
    assert arr.shape == (2, 3)
    assert arr.dtype == np.float64
    empty = triples_to_array([])
    assert empty.shape == (0, 3)
