"""
reasonlib: quantized probability distributions for reasoning-graph nodes.
"""

from .core.distribution import (
    DistributionError,
    DomainInterpretation,
    DomainType,
    ProbabilityDistribution,
    Region,
)
from .graph import DistributionNode, NodeBase

__version__ = "0.1.0"

__all__ = [
    "DistributionError",
    "DomainInterpretation",
    "DomainType",
    "ProbabilityDistribution",
    "Region",
    "DistributionNode",
    "NodeBase",
    "__version__",
]
