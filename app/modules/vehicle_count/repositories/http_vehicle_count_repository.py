"""HTTP implementation of the vehicle count repository"""

import aiohttp

from app.enums import UnavailableReasonEnum
from app.modules.vehicle_count.domain.entities import DateRange
from app.modules.vehicle_count.domain.outcomes import SourceOutcome, SourceUnavailable
from app.modules.vehicle_count.repositories.vehicle_count_repository import (
    PayloadMapper,
    VehicleCountRepository,
)
from app.modules.vehicle_count.utils import DEFAULT_SOURCE_TYPE, get_logger

logger = get_logger()


class HttpVehicleCountRepository(VehicleCountRepository):
    """Reads vehicle counts from the external read endpoint, one source per call"""

    def __init__(
        self,
        base_url: str,
        source_type: str = DEFAULT_SOURCE_TYPE,
        timeout: float | None = None,
    ):
        """
        Args:
            base_url: Read endpoint URL, without query string
            source_type: Value of the `type` query parameter
            timeout: Total seconds per request, None for no timeout
        """
        self.base_url = base_url
        self.source_type = source_type
        self.timeout = timeout

    def build_params(self, source_id: int, date_range: DateRange) -> dict[str, str]:
        """Query parameters for one source. Dates are passed through verbatim."""
        return {
            "type": self.source_type,
            "id": str(source_id),
            "start": date_range.start_string,
            "stop": date_range.end_string,
        }

    async def fetch(self, source_id: int, date_range: DateRange) -> SourceOutcome:
        params = self.build_params(source_id, date_range)
        logger.debug(f"Fetching vehicle counts for camera {source_id}: {params}")

        try:
            async with aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as session:
                async with session.get(
                    self.base_url,
                    params=params,
                    headers={"Accept": "application/json"},
                ) as response:
                    if not 200 <= response.status < 300:
                        logger.warning(
                            f"HTTP error for camera {source_id}! status: {response.status}"
                        )
                        return SourceUnavailable(
                            source_id,
                            UnavailableReasonEnum.HTTP_STATUS,
                            f"status {response.status}",
                        )
                    body = await response.read()
        except Exception as exc:
            logger.warning(f"Error fetching data for camera {source_id}: {exc!r}")
            return SourceUnavailable(
                source_id, UnavailableReasonEnum.NETWORK_ERROR, repr(exc)
            )

        outcome = PayloadMapper.parse(source_id, body)
        if isinstance(outcome, SourceUnavailable):
            logger.warning(f"Camera {source_id} unavailable: {outcome.detail}")
        return outcome
