"""
Domain abstractions for quantized probability distributions.

Responsibilities:
    * classify storage domains (continuous, discrete-integer, truth) and the
      node-facing interpretations that select them
    * attach the domain-specific validation, contiguity and range-query rules
      to one variant class per domain
    * keep the variant set closed: every ``DomainType`` has exactly one rule
      class and every ``DomainInterpretation`` maps to exactly one domain
"""
# 说明：分布容器使用的“域（Domain）”抽象。
# 职责：
# - DomainType / DomainInterpretation：存储域与节点侧解释标签两组固定枚举，二者一一对应
# - BaseDomain 及三个变体：各自携带点/区间取值校验、完备性（无间隙）判定与区间求和规则
# - make_domain / domain_for_interpretation：由标签构造规则对象、由解释查表得到存储域（全函数）
# 约定：
# - 注册表在导入时做穷尽性检查，新增枚举成员而未提供变体会直接导致导入失败
# - 接受枚举成员、其取值字符串或原始驼峰写法（如 "DiscreteInteger"），其余输入抛 UnknownDomainError

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, Type

from ..utils.math_utils import approx_equal, exact_sum, is_integral
from .errors import InvalidArgumentError, OutOfDomainError, UnknownDomainError
from .region import Region


def _normalize_tag(name: str) -> str:
    # 忽略大小写、空格与下划线，使 "DiscreteInteger" / "discrete_integer" 均可识别
    return name.strip().replace(" ", "").replace("_", "").lower()


class DomainType(enum.Enum):
    """Storage domain a distribution is defined over."""

    CONTINUOUS = "continuous"
    DISCRETE_INTEGER = "discrete_integer"
    TRUTH = "truth"

    @classmethod
    def from_str(cls, name: str) -> "DomainType":
        key = _normalize_tag(name)
        for member in cls:
            if _normalize_tag(member.value) == key:
                return member
        raise UnknownDomainError(f"unknown domain type '{name}'")


class DomainInterpretation(enum.Enum):
    """Node-facing label that selects a storage domain."""

    TRUTH = "truth"
    CONTINUOUS_RANGE = "continuous_range"
    DISCRETE_RANGE = "discrete_range"

    @classmethod
    def from_str(cls, name: str) -> "DomainInterpretation":
        key = _normalize_tag(name)
        for member in cls:
            if _normalize_tag(member.value) == key:
                return member
        raise UnknownDomainError(f"unknown domain interpretation '{name}'")


def coerce_domain_type(value: Any) -> DomainType:
    if isinstance(value, DomainType):
        return value
    if isinstance(value, str):
        return DomainType.from_str(value)
    raise UnknownDomainError(f"unknown domain type {value!r}")


def coerce_interpretation(value: Any) -> DomainInterpretation:
    if isinstance(value, DomainInterpretation):
        return value
    if isinstance(value, str):
        return DomainInterpretation.from_str(value)
    raise UnknownDomainError(f"unknown domain interpretation {value!r}")


@dataclass(frozen=True)
class DomainInfo:
    """Lightweight descriptor used for logging and snapshot inspection."""

    name: str
    dtype: str
    bounds: Optional[Tuple[Optional[float], Optional[float]]] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dtype": self.dtype,
            "bounds": None if self.bounds is None else list(self.bounds),
            "metadata": dict(self.metadata),
        }


class BaseDomain(ABC):
    """Abstract base class for the domain variants."""
    # 所有域变体的抽象基类：统一容差、名称与校验 / 完备性 / 区间求和接口

    domain_type: ClassVar[DomainType]
    dtype: ClassVar[str] = "float64"
    bounds: ClassVar[Optional[Tuple[float, float]]] = None
    supports_points: ClassVar[bool] = False
    supports_ranges: ClassVar[bool] = False

    def __init__(self, tolerance: float):
        self._tolerance = float(tolerance)

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def name(self) -> str:
        return self.domain_type.value

    def validate_point(self, value: float) -> None:
        """Raise when ``value`` is not a legal point of this domain."""

    def validate_range(self, lower: float, upper: float) -> None:
        """Raise when ``[lower, upper]`` is not a legal range of this domain."""

    @abstractmethod
    def is_contiguous(self, ordered: Sequence[Region]) -> bool:
        """Return True when regions sorted by lower bound leave no gaps."""

    def range_mass(self, regions: Sequence[Region], lower: float, upper: float) -> float:
        """Total mass of the regions lying within ``[lower - tol, upper + tol]``."""
        tol = self._tolerance
        return exact_sum(
            region.probability
            for region in regions
            if region.lower_bound >= lower - tol and region.upper_bound <= upper + tol
        )

    def describe(self) -> DomainInfo:
        return DomainInfo(
            name=self.name,
            dtype=self.dtype,
            bounds=self.bounds,
            metadata={
                "points": self.supports_points,
                "ranges": self.supports_ranges,
                "tolerance": self._tolerance,
            },
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tolerance={self._tolerance!r})"


class TruthDomain(BaseDomain):
    """Truth values in ``[0, 1]``; accepts both points and ranges."""

    domain_type = DomainType.TRUTH
    bounds = (0.0, 1.0)
    supports_points = True
    supports_ranges = True

    def validate_point(self, value: float) -> None:
        if value < 0.0 or value > 1.0:
            raise InvalidArgumentError(f"value {value!r} must be between 0 and 1 for the truth domain")

    def validate_range(self, lower: float, upper: float) -> None:
        if lower < 0.0 or upper > 1.0:
            raise OutOfDomainError(f"truth domain bounds must be within [0, 1], got [{lower!r}, {upper!r}]")

    def is_contiguous(self, ordered: Sequence[Region]) -> bool:
        # 真值域的完备性只看总概率，不要求覆盖无间隙
        return True


class DiscreteIntegerDomain(BaseDomain):
    """Integer points only; ranges are rejected by the container."""

    domain_type = DomainType.DISCRETE_INTEGER
    dtype = "int64"
    supports_points = True

    def validate_point(self, value: float) -> None:
        if not is_integral(value, self._tolerance):
            raise InvalidArgumentError(f"value {value!r} must be an integer for the discrete-integer domain")

    def is_contiguous(self, ordered: Sequence[Region]) -> bool:
        # 相邻取值必须恰好相差 1（容差内）
        for previous, current in zip(ordered, ordered[1:]):
            if not approx_equal(current.lower_bound - previous.lower_bound, 1.0, self._tolerance):
                return False
        return True


class ContinuousDomain(BaseDomain):
    """Real line partitioned into bounded ranges."""

    domain_type = DomainType.CONTINUOUS
    supports_ranges = True

    def is_contiguous(self, ordered: Sequence[Region]) -> bool:
        for previous, current in zip(ordered, ordered[1:]):
            if not approx_equal(current.lower_bound, previous.upper_bound, self._tolerance):
                return False
        return True

    def range_mass(self, regions: Sequence[Region], lower: float, upper: float) -> float:
        # 仅统计与查询区间上下界（容差内）完全一致的区域；不做部分重叠的聚合
        tol = self._tolerance
        return exact_sum(
            region.probability
            for region in regions
            if approx_equal(region.lower_bound, lower, tol) and approx_equal(region.upper_bound, upper, tol)
        )


_DOMAIN_CLASSES: Dict[DomainType, Type[BaseDomain]] = {
    cls.domain_type: cls for cls in (TruthDomain, DiscreteIntegerDomain, ContinuousDomain)
}

_INTERPRETATION_DOMAINS: Dict[DomainInterpretation, DomainType] = {
    DomainInterpretation.TRUTH: DomainType.TRUTH,
    DomainInterpretation.CONTINUOUS_RANGE: DomainType.CONTINUOUS,
    DomainInterpretation.DISCRETE_RANGE: DomainType.DISCRETE_INTEGER,
}

if set(_DOMAIN_CLASSES) != set(DomainType):  # pragma: no cover - import-time guard
    raise RuntimeError(f"domain variants missing for {set(DomainType) - set(_DOMAIN_CLASSES)}")
if set(_INTERPRETATION_DOMAINS) != set(DomainInterpretation):  # pragma: no cover - import-time guard
    raise RuntimeError(
        f"domain mapping missing for {set(DomainInterpretation) - set(_INTERPRETATION_DOMAINS)}"
    )


def make_domain(domain_type: Any, tolerance: float) -> BaseDomain:
    """Build the rule variant for ``domain_type``."""
    return _DOMAIN_CLASSES[coerce_domain_type(domain_type)](tolerance)


def domain_for_interpretation(interpretation: Any) -> DomainType:
    """Total mapping from node interpretation to storage domain."""
    return _INTERPRETATION_DOMAINS[coerce_interpretation(interpretation)]
