"""
Example 03: Continuous Ranges and Tolerance Boundaries.

Goal:
    Partition a continuous domain into adjacent ranges, then probe the
    tolerance rules: too-narrow ranges, boundaries that nearly touch,
    the exact-match range sum, and how points in the tolerance zone of
    two ranges resolve to a single region index.

Usage:
    python examples/basic/03_continuous_boundaries.py
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from reasonlib import DistributionError, DomainType, ProbabilityDistribution

def main(argv=None):
    args = cli.parse_args("Continuous Boundaries Demo", argv)

    dist = ProbabilityDistribution(DomainType.CONTINUOUS, tolerance=args.tolerance)
    eps = dist.tolerance
    dist.add_range(0.0, 1.0, 0.4)
    dist.add_range(1.0 + eps, 2.0, 0.4)

    rejected = {}
    for label, bounds in {
        "too_narrow": (5.0, 5.0 + 4 * eps),
        "boundary_too_close": (2.0 + 0.5 * eps, 3.0),
        "overlap": (1.5, 3.0),
    }.items():
        try:
            dist.add_range(*bounds, 0.1)
        except DistributionError as exc:
            rejected[label] = exc.kind.value

    dist.add_range(2.0, 3.0, 0.2)

    probes = [1.0 - 0.4 * eps, 1.0 + 0.5 * eps, 1.0 + 0.8 * eps, 2.0]
    result = {
        "name": "basic/03_continuous_boundaries",
        "config": {"domain_type": dist.domain_type.value, "tolerance": eps},
        "outputs": {
            "quantization": dist.get_quantization_with_probabilities(),
            "complete": dist.is_complete(),
            "rejected": rejected,
            "p_between_exact": dist.get_probability_between(2.0, 3.0),
            "p_between_partial": dist.get_probability_between(0.0, 2.0),
            "containing": {repr(p): dist.get_containing_range(p) for p in probes},
            "covering": {repr(p): dist.get_covering_ranges(p) for p in probes},
        },
        "artifacts": {},
    }

    out_path = io.write_json(result, Path(args.outdir) / "03_continuous.json")
    result["artifacts"]["json"] = str(out_path)
    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
