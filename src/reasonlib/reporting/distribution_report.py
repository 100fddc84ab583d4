"""
Summary reports for quantized probability distributions.

Responsibilities
  - Capture a read-only snapshot of a distribution's regions and mass.
  - Provide JSON/Markdown exports of the sorted quantization.
  - Render the quantization as a PNG chart (bars for ranges, stems for points).

Limitations
  - Report content reflects the distribution at construction time; later
    insertions are not picked up.
  - Rendering relies on matplotlib, imported lazily on first use.
"""
# 说明：量化概率分布的摘要报告工具。
# 职责：
# - 在构造时对分布做只读快照（排序后的区域、总概率、完备性）
# - 提供 JSON / Markdown 导出，便于文档或日志中展示
# - 可选的 PNG 渲染：区间绘制为柱状，点绘制为竖线
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..core.distribution.probability_distribution import ProbabilityDistribution
from ..core.distribution.region import Region
from ..core.utils.param_validation import ensure, ensure_type
from ..core.utils.serialization import serialize_to_json


class DistributionReport:
    """Snapshot of a distribution for export and rendering."""

    def __init__(self, distribution: ProbabilityDistribution, *, title: Optional[str] = None):
        ensure_type(distribution, (ProbabilityDistribution,), label="distribution")
        self.title = title or f"{distribution.domain_type.value} distribution"
        self.domain_type = distribution.domain_type
        self.tolerance = distribution.tolerance
        self.regions: List[Region] = [Region(*triple) for triple in distribution.get_quantization_with_probabilities()]
        self.total_probability = distribution.total_probability
        self.remaining_probability = distribution.remaining_probability
        self.complete = distribution.is_complete()

    def summary(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "domain_type": self.domain_type.value,
            "tolerance": self.tolerance,
            "region_count": len(self.regions),
            "total_probability": self.total_probability,
            "remaining_probability": self.remaining_probability,
            "complete": self.complete,
        }

    def to_dict(self) -> Dict[str, Any]:
        payload = self.summary()
        payload["regions"] = [region.to_dict() for region in self.regions]
        return payload

    def to_json(self) -> str:
        return serialize_to_json(self.to_dict())

    def to_markdown(self) -> str:
        # 以 Markdown 表格导出排序后的区域；点区域只展示一个取值
        header = "| lower | upper | probability |\n| --- | --- | --- |\n"
        rows = []
        for region in self.regions:
            upper = "" if region.is_point else f"{region.upper_bound:.6g}"
            rows.append(f"| {region.lower_bound:.6g} | {upper} | {region.probability:.4f} |")
        return header + "\n".join(rows)

    def render_png(
        self,
        path: Union[str, Path],
        *,
        title: Optional[str] = None,
        dpi: int = 150,
        figsize: Tuple[float, float] = (8.0, 4.0),
        label_fontsize: int = 10,
    ) -> Path:
        """Render the quantization into a PNG file."""
        ensure(len(self.regions) > 0, "no regions available to render")

        # 延迟导入 matplotlib，没有显示环境时使用 Agg 后端
        import sys
        import matplotlib

        if "matplotlib.pyplot" not in sys.modules:
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=figsize)
        ranges = [region for region in self.regions if not region.is_point]
        points = [region for region in self.regions if region.is_point]
        if ranges:
            ax.bar(
                [region.lower_bound for region in ranges],
                [region.probability for region in ranges],
                width=[region.width for region in ranges],
                align="edge",
                edgecolor="#333333",
                alpha=0.7,
                label="ranges",
            )
        if points:
            xs = [region.lower_bound for region in points]
            ys = [region.probability for region in points]
            ax.vlines(xs, 0.0, ys, colors="#c0392b", linewidth=2)
            ax.plot(xs, ys, "o", color="#c0392b", markersize=4, label="points")
        ax.set_xlabel("value", fontsize=label_fontsize)
        ax.set_ylabel("probability", fontsize=label_fontsize)
        ax.set_title(title or self.title)
        if ranges and points:
            ax.legend()

        fig.tight_layout()
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=dpi)
        plt.close(fig)
        return out_path
