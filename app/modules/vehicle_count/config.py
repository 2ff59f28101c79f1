"""Configuration settings for the vehicle count module"""

from app.modules.vehicle_count.utils.constants import CHART_COLORS


class ChartConfig:
    """Bar chart rendering configuration"""

    FIGURE_SIZE = (8, 4.5)
    DPI = 110
    # Fraction of a category slot shared by the direction bars
    GROUP_WIDTH = 0.8
    COLORS = CHART_COLORS

    DEFAULT_TITLE = "Vehicle counts by type and direction (all cameras)"
    SOURCE_TITLE = "Vehicle counts by type and direction (camera {source_id})"
