"""
Example 01: Truth-valued Node.

Goal:
    Build a node whose interpretation is a truth value, mix exact truth
    points with sub-interval beliefs, and write a versioned JSON snapshot
    with the node content masked. With --plot the quantization is also
    rendered to PNG (requires matplotlib).

Usage:
    python examples/basic/01_truth_node.py --outdir ./_outputs --plot
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
from reasonlib import DistributionError, DistributionNode, DomainInterpretation
from reasonlib.reporting import DistributionReport

def main(argv=None):
    args = cli.parse_args("Truth Node Demo", argv)

    node = DistributionNode(1, "the bridge will open on time", DomainInterpretation.TRUTH, tolerance=args.tolerance)
    node.add_distribution_point(1.0, 0.5)
    node.add_distribution_point(0.0, 0.2)
    node.add_distribution_range(0.25, 0.75, 0.3)

    # 越界的真值会被拒绝，分布保持不变
    rejected = None
    try:
        node.add_distribution_point(1.5, 0.0)
    except DistributionError as exc:
        rejected = exc.kind.value

    distribution = node.distribution
    result = {
        "name": "basic/01_truth_node",
        "config": {
            "interpretation": node.interpretation.value,
            "domain_type": node.domain_type.value,
            "tolerance": distribution.tolerance,
        },
        "outputs": {
            "quantization": distribution.get_quantization_with_probabilities(),
            "p_true": distribution.get_probability(1.0),
            "p_half": distribution.get_probability(0.5),
            "complete": distribution.is_complete(),
            "rejected_kind": rejected,
        },
        "artifacts": {},
    }

    report = DistributionReport(distribution, title="bridge opens on time")
    result["outputs"]["table"] = "\n" + report.to_markdown()

    snapshot = io.write_snapshot(node.to_json(mask_content=True), Path(args.outdir) / "01_truth_node.snapshot.json")
    if args.plot:
        result["artifacts"]["png"] = str(report.render_png(Path(args.outdir) / "01_truth_node.png"))
    out_path = io.write_json(result, Path(args.outdir) / "01_truth_node.json")
    result["artifacts"]["snapshot"] = str(snapshot)
    result["artifacts"]["json"] = str(out_path)
    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
