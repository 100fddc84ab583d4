"""
Unit tests for resolving points that sit in the tolerance zone of several ranges.
"""
# 说明：歧义点归属与容差边界行为的单元测试。
# 覆盖：
# - get_containing_range：候选为容差放宽后覆盖该点的区域，按到最近边界的距离取最小，距离相同取较小下标
# - get_covering_ranges：列出全部候选；最小宽度约束下任一点至多被两个区域覆盖
# - 容差相等的非传递性：a≈b、b≈c 但 a≉c 时插入结果取决于顺序

import pytest

from reasonlib.core.distribution import (
    DomainType,
    DuplicateRegionError,
    NotContainedError,
    ProbabilityDistribution,
)

EPS = 1e-10


def ranges(*bounds):
    distribution = ProbabilityDistribution(DomainType.CONTINUOUS)
    for lower, upper in bounds:
        distribution.add_range(lower, upper, 0.1)
    return distribution


def test_point_inside_single_range() -> None:
    distribution = ranges((0, 1), (1 + EPS, 2))
    assert distribution.get_containing_range(0.5) == 0
    assert distribution.get_containing_range(1.5) == 1
    assert distribution.get_containing_range(1 - 0.4 * EPS) == 0


def test_ambiguous_point_resolves_to_nearest_boundary() -> None:
    distribution = ranges((0, 1), (1 + EPS, 2))
    # 1 + 0.5ε 到两侧边界距离完全相同，取较小下标
    assert distribution.get_containing_range(1 + 0.5 * EPS) == 0
    assert distribution.get_containing_range(1 + 0.8 * EPS) == 1
    assert distribution.get_covering_ranges(1 + 0.5 * EPS) == [0, 1]


def test_wider_gap_has_unambiguous_sides() -> None:
    distribution = ranges((0, 1), (1 + 2 * EPS, 2))
    assert distribution.get_containing_range(1 + 0.5 * EPS) == 0
    assert distribution.get_containing_range(1 + 1.5 * EPS) == 1
    assert distribution.get_covering_ranges(1 + 0.5 * EPS) == [0]


def test_shared_boundary_ties_to_lower_index() -> None:
    distribution = ranges((1, 2), (0, 1))
    # 下标是插入顺序，而不是排序后的位置
    assert distribution.get_containing_range(1) == 0
    assert distribution.get_containing_range(0.5) == 1


def test_tolerance_edge_is_covered() -> None:
    distribution = ranges((0, 1))
    assert distribution.get_containing_range(1 + EPS) == 0
    with pytest.raises(NotContainedError):
        distribution.get_containing_range(1 + 3 * EPS)


def test_no_point_is_covered_by_three_ranges() -> None:
    distribution = ranges((0, 1), (1, 1 + 5 * EPS), (1 + 5 * EPS, 2))
    probes = [1 + k * 0.5 * EPS for k in range(-4, 15)]
    for probe in probes:
        assert len(distribution.get_covering_ranges(probe)) <= 2


def test_not_contained() -> None:
    distribution = ranges((0, 1))
    with pytest.raises(NotContainedError):
        distribution.get_containing_range(5)
    # NotContainedError 同时可按 LookupError 捕获
    with pytest.raises(LookupError):
        ProbabilityDistribution(DomainType.CONTINUOUS).get_containing_range(0)
    assert distribution.get_covering_ranges(5) == []


def test_discrete_points_resolve_by_distance() -> None:
    distribution = ProbabilityDistribution(DomainType.DISCRETE_INTEGER)
    distribution.add_point(1, 0.5)
    distribution.add_point(2, 0.5)
    assert distribution.get_containing_range(2) == 1
    assert distribution.get_containing_range(1 - 0.5 * EPS) == 0


def test_tolerant_equality_is_not_transitive() -> None:
    a, b, c = 0.5, 0.5 + 0.75 * EPS, 0.5 + 1.5 * EPS
    distribution = ProbabilityDistribution(DomainType.TRUTH)
    distribution.add_point(a, 0.2)
    distribution.add_point(c, 0.2)
    with pytest.raises(DuplicateRegionError):
        distribution.add_point(b, 0.2)
    assert len(distribution) == 2

    reordered = ProbabilityDistribution(DomainType.TRUTH)
    reordered.add_point(b, 0.2)
    with pytest.raises(DuplicateRegionError):
        reordered.add_point(a, 0.2)
    with pytest.raises(DuplicateRegionError):
        reordered.add_point(c, 0.2)
