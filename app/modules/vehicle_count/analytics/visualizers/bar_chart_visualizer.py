"""Bar charts of summed counts per category, one series per direction"""

from io import BytesIO

import matplotlib

matplotlib.use("Agg")  # use non-interactive backend (runs in worker threads)
import matplotlib.pyplot as plt
import numpy as np

from app.modules.vehicle_count.analytics.calculators.cross_tab import CrossTab
from app.modules.vehicle_count.config import ChartConfig


class BarChartVisualizer:
    """Creates grouped bar charts from CrossTabs"""

    @staticmethod
    def plot_cross_tab(cross_tab: CrossTab, title: str | None = None) -> bytes | None:
        """Render the cross-tab as PNG bytes, or None when there is nothing to plot"""
        if cross_tab is None or cross_tab.is_empty:
            return None

        fig, ax = plt.subplots(figsize=ChartConfig.FIGURE_SIZE)
        BarChartVisualizer._draw_bars(ax, cross_tab)
        BarChartVisualizer._configure_chart(fig, ax, title or ChartConfig.DEFAULT_TITLE)
        return BarChartVisualizer._to_png(fig)

    @staticmethod
    def _draw_bars(ax, cross_tab: CrossTab) -> None:
        positions = np.arange(len(cross_tab.categories))
        series = cross_tab.series()
        width = ChartConfig.GROUP_WIDTH / max(len(series), 1)
        offset = (len(series) - 1) * width / 2

        for index, (direction, counts) in enumerate(series.items()):
            color = ChartConfig.COLORS[index % len(ChartConfig.COLORS)]
            ax.bar(
                positions + index * width - offset,
                counts,
                width,
                label=direction,
                color=color,
                edgecolor=color,
                alpha=0.6,
                linewidth=1,
            )

        ax.set_xticks(positions)
        ax.set_xticklabels(cross_tab.categories)

    @staticmethod
    def _configure_chart(fig, ax, title: str) -> None:
        ax.set_xlabel("Vehicle type")
        ax.set_ylabel("Count")
        ax.set_ylim(bottom=0)
        ax.set_title(title)
        ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.12), ncol=4)
        fig.tight_layout()

    @staticmethod
    def _to_png(fig) -> bytes:
        buffer = BytesIO()
        fig.savefig(buffer, format="png", dpi=ChartConfig.DPI)
        plt.close(fig)
        return buffer.getvalue()
