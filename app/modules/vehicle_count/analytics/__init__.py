"""Analytics module - cross-tabulation and charts of vehicle counts"""

from app.modules.vehicle_count.analytics.calculators import (
    CrossTab,
    CrossTabCalculator,
    DatasetMapper,
)
from app.modules.vehicle_count.analytics.visualizers import BarChartVisualizer

__all__ = [
    "CrossTab",
    "CrossTabCalculator",
    "DatasetMapper",
    "BarChartVisualizer",
]
