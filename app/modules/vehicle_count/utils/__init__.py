"""
utils package - vehicle count utilities
---------------------------------------
"""

from app.modules.vehicle_count.utils.constants import (
    CHART_COLORS,
    DEFAULT_SOURCE_TYPE,
    FAILURE_NOTICE,
    NO_DATA_NOTICE,
    PLACEHOLDER,
)
from app.modules.vehicle_count.utils.datetime import DateTimeService
from app.modules.vehicle_count.utils.logging import get_logger

__all__ = [
    "CHART_COLORS",
    "DEFAULT_SOURCE_TYPE",
    "FAILURE_NOTICE",
    "NO_DATA_NOTICE",
    "PLACEHOLDER",
    "DateTimeService",
    "get_logger",
]
