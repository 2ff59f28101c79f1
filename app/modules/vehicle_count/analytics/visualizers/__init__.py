from app.modules.vehicle_count.analytics.visualizers.bar_chart_visualizer import (
    BarChartVisualizer,
)

__all__ = ["BarChartVisualizer"]
