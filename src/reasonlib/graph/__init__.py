"""Graph nodes that own quantized probability distributions."""

from .node import DistributionNode, NodeBase

__all__ = ["DistributionNode", "NodeBase"]
