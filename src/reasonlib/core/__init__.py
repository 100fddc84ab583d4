"""
Core building blocks: distributions, domains and shared utilities.
"""

from .distribution import (
    ContinuousDomain,
    DiscreteIntegerDomain,
    DistributionError,
    DomainInterpretation,
    DomainType,
    ErrorKind,
    ProbabilityDistribution,
    Region,
    TruthDomain,
    domain_for_interpretation,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__ = [
    "ContinuousDomain",
    "DiscreteIntegerDomain",
    "DistributionError",
    "DomainInterpretation",
    "DomainType",
    "ErrorKind",
    "ProbabilityDistribution",
    "Region",
    "TruthDomain",
    "domain_for_interpretation",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
