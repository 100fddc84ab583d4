"""
Numerical utilities shared across the engine.

Responsibilities
  - Provide tolerance-based comparisons used by every region check.
  - Provide exact summation of probability masses.
  - Export region triples as float64 numpy arrays.

Usage Context
  - Use wherever two reals must be compared under the engine tolerance.
  - Intended for small utility helpers reused across modules.

Limitations
  - Tolerant equality is not transitive: approx_equal(a, b) and
    approx_equal(b, c) do not imply approx_equal(a, c).
"""
# 说明：库内共享的数值工具函数集合，集中实现容差比较与数值稳定的求和。
# 职责：
# - 提供基于容差的相等 / 整数判定，供区间、点与总概率校验统一使用
# - 使用 math.fsum 对概率质量做精确求和，结果与插入顺序无关
# - 将 (下界, 上界, 概率) 三元组导出为 float64 的 numpy 数组

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]
Triple = Tuple[float, float, float]


def approx_equal(a: float, b: float, tolerance: float) -> bool:
    """Return True when ``|a - b| < tolerance``."""
    return abs(a - b) < tolerance


def is_integral(value: float, tolerance: float) -> bool:
    """Return True when ``value`` lies within ``tolerance`` of an integer."""
    # 以最近整数为参照，避免 3 - 0.1ε 这类略小于整数的值被误判
    return abs(value - round(value)) < tolerance


def exact_sum(values: Iterable[float]) -> float:
    """Sum ``values`` without accumulating rounding error."""
    return math.fsum(values)


def triples_to_array(triples: Iterable[Triple]) -> np.ndarray:
    """Stack triples into an ``(n, 3)`` float64 array (``(0, 3)`` when empty)."""
    # 空输入时仍返回二维形状，方便调用方直接按列切片
    rows = [tuple(float(item) for item in triple) for triple in triples]
    if not rows:
        return np.empty((0, 3), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)
