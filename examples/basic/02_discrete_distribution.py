"""
Example 02: Discrete-integer Distribution.

Goal:
    Fill a six-sided die distribution in arbitrary order, show the
    rejection of duplicates and non-integers, and query completeness,
    sorted quantization and aggregated range mass.

Usage:
    python examples/basic/02_discrete_distribution.py
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
    args = cli.parse_args("Discrete Distribution Demo", argv)

    die = ProbabilityDistribution(DomainType.DISCRETE_INTEGER, tolerance=args.tolerance)
    rejected = {}
    for face in (4, 1, 6, 2, 5):
        die.add_point(face, 1 / 6)
    complete_before = die.is_complete()

    for label, (value, probability) in {
        "duplicate": (4, 0.1),
        "non_integer": (3.5, 0.1),
        "mass": (3, 0.5),
    }.items():
        try:
            die.add_point(value, probability)
        except DistributionError as exc:
            rejected[label] = exc.kind.value

    die.add_point(3, 1 / 6)

    result = {
        "name": "basic/02_discrete_distribution",
        "config": {"domain_type": die.domain_type.value, "tolerance": die.tolerance},
        "outputs": {
            "complete_before_last_face": complete_before,
            "complete": die.is_complete(),
            "faces": [lower for lower, _ in die.get_quantization()],
            "p_between_2_4": die.get_probability_between(2, 4),
            "rejected": rejected,
            "total": die.total_probability,
        },
        "artifacts": {},
    }

    out_path = io.write_json(result, Path(args.outdir) / "02_discrete.json")
    result["artifacts"]["json"] = str(out_path)
    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
