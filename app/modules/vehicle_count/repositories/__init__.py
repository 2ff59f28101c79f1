"""Repository layer for vehicle count data"""

from .vehicle_count_repository import PayloadMapper, VehicleCountRepository
from .http_vehicle_count_repository import HttpVehicleCountRepository

__all__ = ["VehicleCountRepository", "PayloadMapper", "HttpVehicleCountRepository"]
