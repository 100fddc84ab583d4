"""Reporting helpers for distributions and nodes."""

from .distribution_report import DistributionReport

__all__ = ["DistributionReport"]
