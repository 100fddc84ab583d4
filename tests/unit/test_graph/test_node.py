"""
Unit tests for distribution-carrying graph nodes.
"""
# 说明：DistributionNode 的单元测试。
# 覆盖：
# - 解释标签到存储域的映射（含字符串写法）与节点身份校验
# - 各解释下点 / 区间插入的转发行为及原样透出的错误类型
# - 版本号与 to_dict 结构

import pytest

from reasonlib.core.distribution import (
    DomainInterpretation,
    DomainType,
    DuplicateRegionError,
    InvalidArgumentError,
    InvalidOperationError,
    MassExceededError,
    OverlappingRangeError,
    UnknownDomainError,
)
from reasonlib.core.utils import ParamValidationError
from reasonlib.graph import DistributionNode, NodeBase


@pytest.mark.parametrize(
    "interpretation, domain_type",
    [
        (DomainInterpretation.TRUTH, DomainType.TRUTH),
        (DomainInterpretation.CONTINUOUS_RANGE, DomainType.CONTINUOUS),
        (DomainInterpretation.DISCRETE_RANGE, DomainType.DISCRETE_INTEGER),
        ("Truth", DomainType.TRUTH),
        ("ContinuousRange", DomainType.CONTINUOUS),
        ("discrete_range", DomainType.DISCRETE_INTEGER),
    ],
)
def test_node_domain_follows_interpretation(interpretation, domain_type) -> None:
    node = DistributionNode(1, "claim", interpretation)
    assert node.domain_type is domain_type
    assert node.distribution.domain_type is domain_type
    assert len(node.distribution) == 0


def test_unknown_interpretation() -> None:
    with pytest.raises(UnknownDomainError):
        DistributionNode(1, "claim", "fuzzy")


@pytest.mark.parametrize("node_id, content", [(True, "x"), ("1", "x"), (1, None)])
def test_node_identity_validation(node_id, content) -> None:
    with pytest.raises(ParamValidationError):
        DistributionNode(node_id, content, DomainInterpretation.TRUTH)


def test_version_and_identity() -> None:
    node = DistributionNode(7, "the sky is blue", DomainInterpretation.TRUTH)
    assert node.version == 2
    assert NodeBase.VERSION == 2
    assert node.node_id == 7
    assert node.content == "the sky is blue"
    assert "content" not in repr(node)


def test_truth_node_accepts_points_and_ranges() -> None:
    node = DistributionNode(1, "claim", DomainInterpretation.TRUTH)
    node.add_distribution_point(1.0, 0.6)
    node.add_distribution_range(0.0, 0.5, 0.4)
    assert node.distribution.is_complete()
    with pytest.raises(InvalidArgumentError):
        node.add_distribution_point(2.0, 0.0)


def test_discrete_node_rejects_ranges() -> None:
    node = DistributionNode(2, "dice", DomainInterpretation.DISCRETE_RANGE)
    region = node.add_distribution_point(3, 0.5)
    assert region.as_tuple() == (3.0, 3.0, 0.5)
    with pytest.raises(InvalidOperationError):
        node.add_distribution_range(0, 1, 0.1)
    with pytest.raises(DuplicateRegionError):
        node.add_distribution_point(3, 0.1)
    with pytest.raises(InvalidArgumentError):
        node.add_distribution_point(3.5, 0.1)


def test_continuous_node_rejects_points() -> None:
    node = DistributionNode(3, "temperature", DomainInterpretation.CONTINUOUS_RANGE)
    node.add_distribution_range(0, 10, 0.5)
    with pytest.raises(InvalidOperationError):
        node.add_distribution_point(5, 0.1)
    with pytest.raises(OverlappingRangeError):
        node.add_distribution_range(5, 15, 0.1)
    with pytest.raises(MassExceededError):
        node.add_distribution_range(10, 20, 0.6)
    assert node.distribution.get_probability(5) == 0.5


def test_node_tolerance_is_forwarded() -> None:
    node = DistributionNode(4, "coarse", DomainInterpretation.CONTINUOUS_RANGE, tolerance=1e-3)
    assert node.distribution.tolerance == 1e-3


def test_to_dict_structure() -> None:
    node = DistributionNode(5, "dice", DomainInterpretation.DISCRETE_RANGE)
    node.add_distribution_point(1, 0.5)
    payload = node.to_dict()
    assert payload["node_id"] == 5
    assert payload["content"] == "dice"
    assert payload["interpretation"] == "discrete_range"
    assert payload["distribution"]["domain_type"] == "discrete_integer"
    assert payload["distribution"]["regions"] == [
        {"lower_bound": 1.0, "upper_bound": 1.0, "probability": 0.5}
    ]
