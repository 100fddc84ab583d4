"""
Unit tests for the immutable region triple.
"""
# 说明：Region 几何判定的单元测试。
# 覆盖：
# - 点区域识别、宽度与不可变性
# - contains / covers / occupies 三种包含判定的端点语义
# - gap_to 的符号约定与 overlaps 对相邻区间 / 点区域的处理

import dataclasses

import pytest

from reasonlib.core.distribution import Region

EPS = 1e-10


def test_point_region_properties() -> None:
    point = Region(2.0, 2.0, 0.4)
    assert point.is_point
    assert point.width == 0.0
    assert point.as_tuple() == (2.0, 2.0, 0.4)


def test_region_is_frozen() -> None:
    region = Region(0.0, 1.0, 0.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        region.probability = 0.1  # type: ignore[misc]


def test_containment_variants() -> None:
    region = Region(0.0, 1.0, 0.5)
    assert region.contains(1.0)
    assert not region.contains(1.0 + 0.5 * EPS)
    assert region.covers(1.0 + 0.5 * EPS, EPS)
    assert region.occupies(1.0 + 0.5 * EPS, EPS)
    assert not region.covers(1.0 + 2 * EPS, EPS)


def test_boundary_distance() -> None:
    assert Region(0.0, 10.0, 0.5).boundary_distance(3.0) == 3.0
    assert Region(0.0, 10.0, 0.5).boundary_distance(9.0) == 1.0


def test_gap_sign_convention() -> None:
    region = Region(0.0, 1.0, 0.5)
    assert region.gap_to(2.0, 3.0) == 1.0
    assert region.gap_to(-3.0, -1.0) == 1.0
    assert region.gap_to(1.0, 2.0) == 0.0
    assert region.gap_to(0.5, 2.0) == -0.5


def test_overlaps_shared_boundary_and_points() -> None:
    region = Region(0.0, 1.0, 0.5)
    assert not region.overlaps(1.0, 2.0)
    assert region.overlaps(0.5, 2.0)
    point = Region(1.0, 1.0, 0.5)
    # 点区域落在闭区间端点上同样视为重叠
    assert point.overlaps(0.0, 1.0)
    assert not point.overlaps(1.5, 2.0)
