"""Application layer: search service and dashboard session"""

from app.modules.vehicle_count.application.services import VehicleCountService
from app.modules.vehicle_count.application.session import (
    DashboardSession,
    SearchInProgressError,
)

__all__ = ["VehicleCountService", "DashboardSession", "SearchInProgressError"]
