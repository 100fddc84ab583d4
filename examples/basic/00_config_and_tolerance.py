"""
Example 00: Configuration, Tolerance, and Logging.

Goal:
    Show how the runtime configuration drives new distributions: the
    comparison tolerance is captured once at construction, environment
    variables override defaults, and library loggers mask node content.

Usage:
    python examples/basic/00_config_and_tolerance.py --tolerance 1e-6
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
from reasonlib import DomainType, ProbabilityDistribution
from reasonlib.core.utils import configure, configure_logging, get_config

def main(argv=None):
    args = cli.parse_args("Config and Tolerance Demo", argv)

    # 1. Environment overrides (REASONLIB_TOLERANCE, REASONLIB_LOG_LEVEL, ...)
    config = get_config()
    config.load_from_env()
    if args.tolerance is not None:
        configure(tolerance=args.tolerance)
    configure_logging(config.log_level)

    # 2. Tolerance is fixed per distribution at construction
    before = ProbabilityDistribution(DomainType.DISCRETE_INTEGER)
    configure(tolerance=config.tolerance * 10)
    after = ProbabilityDistribution(DomainType.DISCRETE_INTEGER)

    # 3. Same near-integer value under both tolerances
    probe = 1 + 3 * before.tolerance
    result = {
        "name": "basic/00_config_and_tolerance",
        "config": {
            "tolerance": before.tolerance,
            "log_level": config.log_level,
            "mask_node_content": config.mask_node_content,
        },
        "outputs": {
            "tolerance_after_reconfigure": after.tolerance,
            "probe": probe,
            "probe_accepted_strict": before.can_add_point(probe, 0.5),
            "probe_accepted_loose": after.can_add_point(probe, 0.5),
        },
        "artifacts": {},
    }

    out_path = io.write_json(result, Path(args.outdir) / "00_config.json")
    result["artifacts"]["json"] = str(out_path)
    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
