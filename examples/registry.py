"""
Registry of available examples.
"""
from typing import List, TypedDict

class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    experimental: bool
    description: str

EXAMPLES: List[ExampleMetadata] = [
    # --- Basic ---
    {
        "path": "basic/00_config_and_tolerance.py",
        "tags": ["basic", "p0"],
        "experimental": False,
        "description": "Runtime configuration, environment overrides and logging setup."
    },
    {
        "path": "basic/01_truth_node.py",
        "tags": ["basic", "node", "p0"],
        "experimental": False,
        "description": "Truth-valued node mixing points and ranges, with a masked JSON snapshot."
    },
    {
        "path": "basic/02_discrete_distribution.py",
        "tags": ["basic", "p0"],
        "experimental": False,
        "description": "Discrete-integer distribution: duplicates, completeness and range sums."
    },
    {
        "path": "basic/03_continuous_boundaries.py",
        "tags": ["basic", "p0"],
        "experimental": False,
        "description": "Continuous ranges: minimum width, boundary checks and ambiguous points."
    },
]
