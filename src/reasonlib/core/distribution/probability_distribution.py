"""
Quantized probability distribution container.

Partitions a one-dimensional domain into disjoint regions (points or bounded
ranges), each carrying a probability mass, and enforces the invariants that
keep the partition a valid, eventually-complete distribution.

Responsibilities:
    * validate every insertion against the bound domain and the existing
      regions, committing it only when all invariants still hold
    * keep the total mass at or below one after every insertion
    * answer point, range, quantization and containment queries
    * resolve points that fall in the tolerance zone of several regions

The container is append-only and single-owner. Callers that share one
instance between threads must serialise access themselves: an insertion is a
check-then-append sequence.
"""
# 说明：量化概率分布容器，维护一组互不相交的区域（点或闭区间）及其概率质量。
# 职责：
# - add_point / add_range：按域规则逐项校验，全部通过后才追加（原子性：失败时状态不变）
# - 每次插入后保证总概率不超过 1 + ε
# - is_complete / get_probability / get_quantization 等只读查询
# - get_containing_range / get_covering_ranges：处理容差区内可能同时属于多个区域的歧义点
# 约定：
# - 区域索引即插入顺序下标；查询结果中的排序只影响输出，不改变内部存储顺序
# - 容差在构造时确定，之后对该实例固定不变

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..utils.config import get_config
from ..utils.logging import get_logger
from ..utils.math_utils import approx_equal, exact_sum, triples_to_array
from ..utils.param_validation import ensure, ensure_finite
from .domain import BaseDomain, DomainInfo, DomainType, coerce_domain_type, make_domain
from .errors import (
    BoundaryTooCloseError,
    DistributionError,
    DuplicateRegionError,
    InvalidArgumentError,
    InvalidOperationError,
    MassExceededError,
    NotContainedError,
    OverlappingRangeError,
    RangeTooNarrowError,
)
from .region import Region

logger = get_logger(__name__)

# 区间最小宽度相对容差的倍数：更窄的区间在当前数值精度下无法与浮点噪声区分
MIN_WIDTH_FACTOR = 5.0


RegionLike = Union[Region, Sequence[float], Mapping[str, Any]]


def _unpack_region(item: RegionLike) -> Tuple[Any, Any, Any]:
    if isinstance(item, Region):
        return item.as_tuple()
    if isinstance(item, Mapping):
        return item["lower_bound"], item["upper_bound"], item["probability"]
    lower, upper, probability = item
    return lower, upper, probability


def _validate_probability(probability: Any) -> float:
    numeric = ensure_finite(probability, label="probability", error=InvalidArgumentError)
    ensure(
        0.0 <= numeric <= 1.0,
        f"probability must be between 0 and 1, got {numeric!r}",
        error=InvalidArgumentError,
    )
    return numeric


class ProbabilityDistribution:
    """Append-only partition of a domain into regions with probability mass."""

    def __init__(self, domain_type: Any, *, tolerance: Optional[float] = None):
        """
        Args:
            domain_type: ``DomainType`` member or its string name; fixed for the
                lifetime of the distribution.
            tolerance: Comparison tolerance; defaults to the runtime
                configuration value (1e-10 unless reconfigured).
        """
        resolved = get_config().tolerance if tolerance is None else tolerance
        resolved = ensure_finite(resolved, label="tolerance", error=InvalidArgumentError)
        ensure(resolved > 0.0, "tolerance must be positive", error=InvalidArgumentError)
        self._domain: BaseDomain = make_domain(coerce_domain_type(domain_type), resolved)
        self._tolerance = resolved
        self._regions: List[Region] = []

    # ------------------------------------------------------------------ properties
    @property
    def domain_type(self) -> DomainType:
        return self._domain.domain_type

    @property
    def domain(self) -> BaseDomain:
        return self._domain

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def regions(self) -> Tuple[Region, ...]:
        """Regions in insertion order; positions are the region indices."""
        return tuple(self._regions)

    @property
    def total_probability(self) -> float:
        return exact_sum(region.probability for region in self._regions)

    @property
    def remaining_probability(self) -> float:
        return max(1.0 - self.total_probability, 0.0)

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(tuple(self._regions))

    def __repr__(self) -> str:
        return (
            f"ProbabilityDistribution(domain_type={self.domain_type.value!r}, "
            f"regions={len(self._regions)}, total={self.total_probability:.6g})"
        )

    def describe(self) -> DomainInfo:
        return self._domain.describe()

    # ------------------------------------------------------------------ validation
    def _require_points(self) -> None:
        if not self._domain.supports_points:
            raise InvalidOperationError(
                f"add_point is not valid for the {self._domain.name} domain; use add_range"
            )

    def _require_ranges(self) -> None:
        if not self._domain.supports_ranges:
            raise InvalidOperationError(
                f"add_range is not valid for the {self._domain.name} domain; use add_point"
            )

    def _check_mass(self, probability: float) -> None:
        # 以候选状态计算总概率，超限则拒绝；此时尚未追加，内部状态保持不变
        future = exact_sum([region.probability for region in self._regions] + [probability])
        if future > 1.0 + self._tolerance:
            raise MassExceededError(
                f"total probability cannot exceed 1: requested {probability!r} "
                f"while remaining {self.remaining_probability!r}"
            )

    def _prepare_point(self, value: Any, probability: Any) -> Region:
        self._require_points()
        probability = _validate_probability(probability)
        value = ensure_finite(value, label="value", error=InvalidArgumentError)
        self._domain.validate_point(value)
        for region in self._regions:
            if region.occupies(value, self._tolerance):
                raise DuplicateRegionError(f"a probability is already defined for value {value!r}")
        self._check_mass(probability)
        return Region(value, value, probability)

    def _prepare_range(self, lower: Any, upper: Any, probability: Any) -> Region:
        self._require_ranges()
        probability = _validate_probability(probability)
        lower = ensure_finite(lower, label="lower bound", error=InvalidArgumentError)
        upper = ensure_finite(upper, label="upper bound", error=InvalidArgumentError)
        tol = self._tolerance
        if upper - lower < MIN_WIDTH_FACTOR * tol:
            raise RangeTooNarrowError(
                f"range width must be at least {MIN_WIDTH_FACTOR:g} * tolerance, got [{lower!r}, {upper!r}]"
            )
        self._domain.validate_range(lower, upper)
        # 边界过近：两区间不相交但间隙小于容差；恰好共享边界（间隙为 0）是合法的相邻区间
        for region in self._regions:
            if 0.0 < region.gap_to(lower, upper) < tol:
                raise BoundaryTooCloseError(
                    f"range [{lower!r}, {upper!r}] has a boundary within tolerance of "
                    f"[{region.lower_bound!r}, {region.upper_bound!r}]"
                )
        for region in self._regions:
            if region.overlaps(lower, upper):
                raise OverlappingRangeError(
                    f"range [{lower!r}, {upper!r}] overlaps existing region "
                    f"[{region.lower_bound!r}, {region.upper_bound!r}]"
                )
        self._check_mass(probability)
        return Region(lower, upper, probability)

    # ------------------------------------------------------------------ mutations
    def add_point(self, value: float, probability: float) -> Region:
        """Insert a point region; valid for truth and discrete-integer domains."""
        try:
            region = self._prepare_point(value, probability)
        except DistributionError as exc:
            logger.debug("rejected point %r (p=%r) on %s: %s", value, probability, self._domain.name, exc)
            raise
        self._regions.append(region)
        logger.debug("added point %r (p=%r) on %s", region.lower_bound, region.probability, self._domain.name)
        return region

    def add_range(self, lower: float, upper: float, probability: float) -> Region:
        """Insert a range region; valid for truth and continuous domains."""
        try:
            region = self._prepare_range(lower, upper, probability)
        except DistributionError as exc:
            logger.debug(
                "rejected range [%r, %r] (p=%r) on %s: %s", lower, upper, probability, self._domain.name, exc
            )
            raise
        self._regions.append(region)
        logger.debug(
            "added range [%r, %r] (p=%r) on %s",
            region.lower_bound,
            region.upper_bound,
            region.probability,
            self._domain.name,
        )
        return region

    def extend(self, items: Iterable[RegionLike]) -> None:
        """Insert several regions as one all-or-nothing batch.

        Each item is a ``Region``, a ``(lower, upper, probability)`` triple or
        a mapping with ``lower_bound``/``upper_bound``/``probability`` keys.
        Degenerate items go through :meth:`add_point` when the domain accepts
        points, everything else through :meth:`add_range`.
        """
        # 逐项复用 add_point / add_range 的完整校验；任一项失败则回滚本批次已追加的区域
        checkpoint = len(self._regions)
        try:
            for item in items:
                lower, upper, probability = _unpack_region(item)
                if lower == upper and self._domain.supports_points:
                    self.add_point(lower, probability)
                else:
                    self.add_range(lower, upper, probability)
        except (DistributionError, KeyError, TypeError, ValueError):
            del self._regions[checkpoint:]
            raise

    def can_add_point(self, value: float, probability: float) -> bool:
        """Check whether :meth:`add_point` would succeed, without mutating."""
        try:
            self._prepare_point(value, probability)
        except DistributionError:
            return False
        return True

    def can_add_range(self, lower: float, upper: float, probability: float) -> bool:
        """Check whether :meth:`add_range` would succeed, without mutating."""
        try:
            self._prepare_range(lower, upper, probability)
        except DistributionError:
            return False
        return True

    # ------------------------------------------------------------------ queries
    def _sorted_regions(self) -> List[Region]:
        # sorted 是稳定排序：下界相同时（点与以其为下界的区间不可能共存）保持插入顺序
        return sorted(self._regions, key=lambda region: region.lower_bound)

    def is_complete(self) -> bool:
        """True when the total mass is one and, for ordered domains, no gaps remain."""
        if not self._regions:
            return False
        if not self._domain.is_contiguous(self._sorted_regions()):
            return False
        return approx_equal(self.total_probability, 1.0, self._tolerance)

    def get_probability(self, value: float) -> float:
        """Mass of the region holding ``value``; 0.0 when no region does."""
        value = ensure_finite(value, label="value", error=InvalidArgumentError)
        # 精确闭区间包含优先：保证严格位于某区域内部的点总是返回该区域自身的概率
        for region in self._regions:
            if region.contains(value):
                return region.probability
        for region in self._regions:
            if region.covers(value, self._tolerance):
                return region.probability
        return 0.0

    def get_probability_between(self, lower: float, upper: float) -> float:
        """Mass aggregated over ``[lower, upper]`` according to the domain rule.

        Continuous domains only count regions whose bounds equal the query
        bounds within tolerance; partial overlaps contribute nothing.
        """
        lower = ensure_finite(lower, label="lower bound", error=InvalidArgumentError)
        upper = ensure_finite(upper, label="upper bound", error=InvalidArgumentError)
        ensure(lower < upper, "upper bound must be greater than lower bound", error=InvalidArgumentError)
        return self._domain.range_mass(self._regions, lower, upper)

    def get_quantization(self) -> List[Tuple[float, float]]:
        """Region bounds sorted ascending by lower bound."""
        return [region.bounds for region in self._sorted_regions()]

    def get_quantization_with_probabilities(self) -> List[Tuple[float, float, float]]:
        """Region bounds with their mass, sorted ascending by lower bound."""
        return [region.as_tuple() for region in self._sorted_regions()]

    def get_containing_range(self, point: float) -> int:
        """Resolve ``point`` to exactly one region index.

        Every region whose tolerance-widened interval contains the point is a
        candidate, scored by the distance from the point to the nearer of its
        two boundaries. The lowest score wins; exact ties go to the lower
        index.
        """
        point = ensure_finite(point, label="point", error=InvalidArgumentError)
        candidates = [
            (region.boundary_distance(point), index)
            for index, region in enumerate(self._regions)
            if region.covers(point, self._tolerance)
        ]
        if not candidates:
            raise NotContainedError(f"point {point!r} is not contained in any range")
        return min(candidates)[1]

    def get_covering_ranges(self, point: float) -> List[int]:
        """All region indices whose tolerance-widened interval contains ``point``."""
        point = ensure_finite(point, label="point", error=InvalidArgumentError)
        return [index for index, region in enumerate(self._regions) if region.covers(point, self._tolerance)]

    # ------------------------------------------------------------------ export
    def to_array(self) -> np.ndarray:
        """Sorted quantization with probabilities as an ``(n, 3)`` float64 array."""
        return triples_to_array(self.get_quantization_with_probabilities())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain_type": self.domain_type.value,
            "tolerance": self._tolerance,
            "regions": [region.to_dict() for region in self._regions],
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ProbabilityDistribution":
        """Rebuild a distribution by replaying every region through validation."""
        if "domain_type" not in payload:
            raise InvalidArgumentError("serialized distribution missing 'domain_type'")
        distribution = cls(payload["domain_type"], tolerance=payload.get("tolerance"))
        distribution.extend(payload.get("regions", []))
        return distribution
