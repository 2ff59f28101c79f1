from dataclasses import dataclass

from app import config
from app.modules.vehicle_count.application.services import VehicleCountService
from app.modules.vehicle_count.application.session import DashboardSession
from app.modules.vehicle_count.repositories import (
    HttpVehicleCountRepository,
    VehicleCountRepository,
)


@dataclass
class Container:
    repository: VehicleCountRepository
    service: VehicleCountService
    session: DashboardSession


def get_container(repository: VehicleCountRepository | None = None) -> Container:
    """Wire the dashboard from app config, with the HTTP repository by default"""
    repository = repository or HttpVehicleCountRepository(
        base_url=config.VEHICLE_COUNT_BASE_URL,
        source_type=config.VEHICLE_COUNT_SOURCE_TYPE,
        timeout=config.VEHICLE_COUNT_REQUEST_TIMEOUT,
    )
    service = VehicleCountService(
        repository=repository,
        source_ids=config.VEHICLE_COUNT_CAMERA_IDS,
        timezone=config.TIMEZONE,
    )
    return Container(
        repository=repository,
        service=service,
        session=DashboardSession(service),
    )
