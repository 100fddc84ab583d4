"""
Immutable regions of a quantized distribution.

A region is a ``(lower_bound, upper_bound, probability)`` triple. Point
regions have ``lower_bound == upper_bound``. Regions are never updated once
they belong to a distribution.
"""
# 说明：分布中的单个区域（点或闭区间）及其几何判定。
# 职责：
# - Region：不可变三元组 (下界, 上界, 概率)，点区域上下界相等
# - contains / covers / occupies：精确闭区间包含、容差放宽后的包含（含端点）、容差放宽后的严格包含
# - boundary_distance：点到两端边界的最小距离，用于歧义点的归属判定
# - gap_to / overlaps：与另一区间的间隙大小与正重叠判定

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Region:
    lower_bound: float
    upper_bound: float
    probability: float

    @property
    def is_point(self) -> bool:
        return self.lower_bound == self.upper_bound

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.lower_bound, self.upper_bound

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.lower_bound, self.upper_bound, self.probability

    def to_dict(self) -> Dict[str, float]:
        return {
            "lower_bound": float(self.lower_bound),
            "upper_bound": float(self.upper_bound),
            "probability": float(self.probability),
        }

    # ------------------------------------------------------------------ geometry
    def contains(self, value: float) -> bool:
        """Exact closed-interval membership."""
        return self.lower_bound <= value <= self.upper_bound

    def covers(self, value: float, tolerance: float) -> bool:
        """Membership in the interval widened by ``tolerance`` on both sides."""
        # 端点含在内：恰好位于 lower - ε 或 upper + ε 的点同样视为被覆盖
        return self.lower_bound - tolerance <= value <= self.upper_bound + tolerance

    def occupies(self, value: float, tolerance: float) -> bool:
        """Strict variant of :meth:`covers`, matching ``approx_equal`` for points."""
        return self.lower_bound - tolerance < value < self.upper_bound + tolerance

    def boundary_distance(self, value: float) -> float:
        return min(abs(value - self.lower_bound), abs(value - self.upper_bound))

    def gap_to(self, lower: float, upper: float) -> float:
        """Signed gap between this region and ``[lower, upper]``.

        Positive when the two are separated, zero when they touch and
        negative when they intersect.
        """
        if lower >= self.upper_bound:
            return lower - self.upper_bound
        if upper <= self.lower_bound:
            return self.lower_bound - upper
        return -min(self.upper_bound, upper) + max(self.lower_bound, lower)

    def overlaps(self, lower: float, upper: float) -> bool:
        """Whether ``[lower, upper]`` intersects this region.

        Two ranges that merely share a boundary do not overlap; a point region
        overlaps any closed range that contains it.
        """
        if self.is_point or lower == upper:
            return lower <= self.upper_bound and upper >= self.lower_bound
        return lower < self.upper_bound and upper > self.lower_bound
