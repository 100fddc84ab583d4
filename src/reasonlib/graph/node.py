"""
Graph nodes that carry a quantized probability distribution.

Responsibilities:
    * hold the node identity (id, content, schema version)
    * derive the storage domain once from the node's interpretation
    * forward point/range insertions to the owned distribution unchanged
    * serialise node snapshots through versioned JSON payloads
"""
# 说明：携带量化概率分布的图节点。
# 职责：
# - NodeBase：节点身份信息（id、内容、模式版本号）与基础序列化
# - DistributionNode：按解释标签在构造时确定存储域，独占一个 ProbabilityDistribution
# - add_distribution_point / add_distribution_range：原样转发给分布容器，错误类型不做包装
# - to_json / from_json：借助 VersionedPayload 做版本化快照；掩码仅按需开启，掩码快照带 masked 标记且不可还原
# 约定：
# - 解释标签与存储域在节点生命周期内不可变；节点层不叠加额外校验

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.distribution.domain import (
    DomainInterpretation,
    DomainType,
    coerce_interpretation,
    domain_for_interpretation,
)
from ..core.distribution.probability_distribution import ProbabilityDistribution
from ..core.distribution.region import Region
from ..core.utils.logging import get_logger
from ..core.utils.param_validation import ParamValidationError, ensure_type
from ..core.utils.serialization import VersionedPayload, mask_sensitive_data

logger = get_logger(__name__)


class NodeBase:
    """Identity shared by every node variant."""

    VERSION = 2

    def __init__(self, node_id: int, content: str):
        if isinstance(node_id, bool):
            raise ParamValidationError("node_id must be instance of int")
        ensure_type(node_id, (int,), label="node_id")
        ensure_type(content, (str,), label="content")
        self._node_id = node_id
        self._content = content

    @property
    def node_id(self) -> int:
        return self._node_id

    @property
    def content(self) -> str:
        return self._content

    @property
    def version(self) -> int:
        return self.VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {"node_id": self._node_id, "content": self._content}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(node_id={self._node_id!r})"


class DistributionNode(NodeBase):
    """Node owning one distribution whose domain follows its interpretation."""

    def __init__(
        self,
        node_id: int,
        content: str,
        interpretation: Any,
        *,
        tolerance: Optional[float] = None,
    ):
        super().__init__(node_id, content)
        self._interpretation = coerce_interpretation(interpretation)
        self._distribution = ProbabilityDistribution(
            domain_for_interpretation(self._interpretation),
            tolerance=tolerance,
        )
        logger.debug(
            "created node %s with %s interpretation",
            node_id,
            self._interpretation.value,
            extra={"content": content},
        )

    @property
    def interpretation(self) -> DomainInterpretation:
        return self._interpretation

    @property
    def domain_type(self) -> DomainType:
        return self._distribution.domain_type

    @property
    def distribution(self) -> ProbabilityDistribution:
        return self._distribution

    def add_distribution_point(self, value: float, probability: float) -> Region:
        return self._distribution.add_point(value, probability)

    def add_distribution_range(self, lower: float, upper: float, probability: float) -> Region:
        return self._distribution.add_range(lower, upper, probability)

    # ------------------------------------------------------------------ serialization
    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["interpretation"] = self._interpretation.value
        payload["distribution"] = self._distribution.to_dict()
        return payload

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DistributionNode":
        """Rebuild a node; regions are replayed through the validating insert path."""
        for key in ("node_id", "content", "interpretation"):
            if key not in payload:
                raise ParamValidationError(f"serialized node missing '{key}'")
        snapshot = payload.get("distribution") or {}
        node = cls(
            payload["node_id"],
            payload["content"],
            payload["interpretation"],
            tolerance=snapshot.get("tolerance"),
        )
        node.distribution.extend(snapshot.get("regions", []))
        return node

    def to_json(self, *, mask_content: bool = False) -> str:
        """Versioned JSON snapshot.

        Masked snapshots replace the content and carry ``"masked": true``;
        they are for display only and :meth:`from_json` refuses them.
        """
        payload = self.to_dict()
        if mask_content:
            payload = mask_sensitive_data(payload, ["content"])
            payload["masked"] = True
        return VersionedPayload(version=str(self.VERSION), payload=payload).to_json()

    @classmethod
    def from_json(cls, text: str) -> "DistributionNode":
        envelope = VersionedPayload.from_json(text)
        if envelope.version != str(cls.VERSION):
            raise ParamValidationError(
                f"unsupported node snapshot version {envelope.version!r}, expected {cls.VERSION}"
            )
        if envelope.payload.get("masked"):
            raise ParamValidationError("masked node snapshot cannot be restored; content was redacted")
        return cls.from_dict(envelope.payload)
