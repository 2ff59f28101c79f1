"""
Vehicle Count Dashboard - multi-camera vehicle count aggregation
================================================================

Fetches vehicle counts for a fixed set of cameras from one read endpoint,
all cameras concurrently, merges the answers and derives the
category x direction cross-tab, the flat table and bar charts.

Usage:
    from app.modules.vehicle_count import get_container

    container = get_container()
    result = await container.session.run_search("2024-01-01", "2024-01-31")
    cross_tab = container.session.cross_tab()
"""

__version__ = "1.0.0"

from app.modules.vehicle_count.application import (
    DashboardSession,
    SearchInProgressError,
    VehicleCountService,
)
from app.modules.vehicle_count.analytics import (
    BarChartVisualizer,
    CrossTab,
    CrossTabCalculator,
)
from app.modules.vehicle_count.container import Container, get_container
from app.modules.vehicle_count.domain import (
    AggregateDataset,
    DateRange,
    DetailRecord,
    SearchResult,
    SourceFetched,
    SourceResult,
    SourceUnavailable,
)
from app.modules.vehicle_count.report import TableProjector
from app.modules.vehicle_count.repositories import (
    HttpVehicleCountRepository,
    PayloadMapper,
    VehicleCountRepository,
)

__all__ = [
    # Application
    "DashboardSession",
    "SearchInProgressError",
    "VehicleCountService",
    "Container",
    "get_container",
    # Domain
    "AggregateDataset",
    "DateRange",
    "DetailRecord",
    "SearchResult",
    "SourceFetched",
    "SourceResult",
    "SourceUnavailable",
    # Projections
    "BarChartVisualizer",
    "CrossTab",
    "CrossTabCalculator",
    "TableProjector",
    # Data access
    "HttpVehicleCountRepository",
    "PayloadMapper",
    "VehicleCountRepository",
    "__version__",
]
