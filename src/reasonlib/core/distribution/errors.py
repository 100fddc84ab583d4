"""
Typed failures raised by probability distributions.

Every failure is synchronous and local: the distribution that raised it is
left exactly as it was before the failing call.
"""
# 说明：概率分布容器的错误类型体系。
# 职责：
# - ErrorKind：错误种类枚举，便于上层（节点 / 命令层）按种类映射为用户可读的校验错误
# - DistributionError：所有分布错误的基类，类属性 kind 标识其种类
# - 各具体错误类型：参数非法、操作与域不匹配、重复区域、区间过窄、边界过近、区间重叠、总概率超限、点未被包含、未知域

from __future__ import annotations

import enum

from ..utils.param_validation import ParamValidationError


class ErrorKind(enum.Enum):
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_OPERATION = "invalid_operation"
    DUPLICATE_REGION = "duplicate_region"
    RANGE_TOO_NARROW = "range_too_narrow"
    BOUNDARY_TOO_CLOSE = "boundary_too_close"
    OVERLAPPING_RANGE = "overlapping_range"
    MASS_EXCEEDED = "mass_exceeded"
    NOT_CONTAINED = "not_contained"
    UNKNOWN_DOMAIN = "unknown_domain"


class DistributionError(Exception):
    """Base exception for distribution failures."""

    kind: ErrorKind = ErrorKind.INVALID_OPERATION


class InvalidArgumentError(DistributionError, ParamValidationError):
    """Raised for malformed probabilities, values or query bounds."""

    kind = ErrorKind.INVALID_ARGUMENT


class RangeTooNarrowError(InvalidArgumentError):
    """Raised when a range is narrower than the minimum distinguishable width."""

    kind = ErrorKind.RANGE_TOO_NARROW


class OutOfDomainError(InvalidArgumentError):
    """Raised when range bounds fall outside a bounded domain."""
    # 与 InvalidArgument 同属参数类错误，Truth 域的区间越界时抛出

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidOperationError(DistributionError):
    """Raised when the insertion method does not match the bound domain."""

    kind = ErrorKind.INVALID_OPERATION


class DuplicateRegionError(DistributionError):
    """Raised when a point is already covered by an existing region."""

    kind = ErrorKind.DUPLICATE_REGION


class BoundaryTooCloseError(DistributionError):
    """Raised when a new boundary sits within tolerance of an existing one."""

    kind = ErrorKind.BOUNDARY_TOO_CLOSE


class OverlappingRangeError(DistributionError):
    """Raised when a new range intersects an existing region."""

    kind = ErrorKind.OVERLAPPING_RANGE


class MassExceededError(DistributionError):
    """Raised when an insertion would push the total mass above one."""

    kind = ErrorKind.MASS_EXCEEDED


class NotContainedError(DistributionError, LookupError):
    """Raised when no region contains the queried point."""

    kind = ErrorKind.NOT_CONTAINED


class UnknownDomainError(DistributionError, ValueError):
    """Raised for a domain or interpretation tag outside the known set."""

    kind = ErrorKind.UNKNOWN_DOMAIN
