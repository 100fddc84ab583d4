"""Quantized probability distributions and their domain variants."""

from .errors import (
    ErrorKind,
    DistributionError,
    InvalidArgumentError,
    RangeTooNarrowError,
    OutOfDomainError,
    InvalidOperationError,
    DuplicateRegionError,
    BoundaryTooCloseError,
    OverlappingRangeError,
    MassExceededError,
    NotContainedError,
    UnknownDomainError,
)
from .region import Region
from .domain import (
    BaseDomain,
    DomainInfo,
    DomainType,
    DomainInterpretation,
    TruthDomain,
    DiscreteIntegerDomain,
    ContinuousDomain,
    coerce_domain_type,
    coerce_interpretation,
    make_domain,
    domain_for_interpretation,
)
from .probability_distribution import (
    MIN_WIDTH_FACTOR,
    ProbabilityDistribution,
)

__all__ = [
    "ErrorKind",
    "DistributionError",
    "InvalidArgumentError",
    "RangeTooNarrowError",
    "OutOfDomainError",
    "InvalidOperationError",
    "DuplicateRegionError",
    "BoundaryTooCloseError",
    "OverlappingRangeError",
    "MassExceededError",
    "NotContainedError",
    "UnknownDomainError",
    "Region",
    "BaseDomain",
    "DomainInfo",
    "DomainType",
    "DomainInterpretation",
    "TruthDomain",
    "DiscreteIntegerDomain",
    "ContinuousDomain",
    "coerce_domain_type",
    "coerce_interpretation",
    "make_domain",
    "domain_for_interpretation",
    "MIN_WIDTH_FACTOR",
    "ProbabilityDistribution",
]
