"""Dashboard session: the single owner of the current dataset"""

from contextlib import asynccontextmanager

from app.enums import SearchStatusEnum, SourceStatusEnum
from app.modules.vehicle_count.analytics import CrossTab, CrossTabCalculator
from app.modules.vehicle_count.application.services import VehicleCountService
from app.modules.vehicle_count.domain.entities import AggregateDataset
from app.modules.vehicle_count.domain.outcomes import SearchResult
from app.modules.vehicle_count.report import TableProjector
from app.modules.vehicle_count.utils import get_logger

logger = get_logger()


class SearchInProgressError(Exception):
    """Raised when a search is triggered while another one is in flight"""


class DashboardSession:
    """
    Holds the dataset of the last search and the busy flag.

    The dataset is replaced in a single assignment once a search settles, so
    readers see either the previous snapshot or the new one. Projections are
    recomputed from the current snapshot on every call.
    """

    def __init__(self, service: VehicleCountService):
        self.service = service
        self._dataset = AggregateDataset()
        self._last_result: SearchResult | None = None
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def dataset(self) -> AggregateDataset:
        return self._dataset

    @property
    def last_result(self) -> SearchResult | None:
        return self._last_result

    @asynccontextmanager
    async def searching(self):
        """Hold the busy flag for the duration of a search, released on every path"""
        if self._busy:
            raise SearchInProgressError("A search is already in progress")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    async def run_search(self, start=None, end=None) -> SearchResult:
        async with self.searching():
            try:
                result = await self.service.search(start, end)
            except Exception:
                self._dataset = AggregateDataset()
                self._last_result = None
                raise
            self._dataset = result.dataset
            self._last_result = result
        if result.notice:
            logger.info(
                f"Search finished with status {result.status.value}: {result.notice}"
            )
        return result

    def cross_tab(self, source_id: int | None = None) -> CrossTab:
        return CrossTabCalculator.compute(self._dataset, source_id)

    def cross_tabs_per_source(self) -> dict[int, CrossTab]:
        return CrossTabCalculator.compute_per_source(self._dataset)

    def table_rows(self) -> list[dict]:
        return TableProjector.rows(self._dataset)

    def source_statuses(self) -> list[dict]:
        """Per-source badge for the last search, in configured order"""
        if self._last_result is None or not self._last_result.outcomes:
            return [
                {
                    "source_id": source_id,
                    "status": SourceStatusEnum.NO_DATA,
                    "reason": None,
                }
                for source_id in self.service.source_ids
            ]
        return [
            {
                "source_id": outcome.source_id,
                "status": outcome.status,
                "reason": getattr(outcome, "reason", None),
            }
            for outcome in self._last_result.outcomes
        ]

    @property
    def status(self) -> SearchStatusEnum | None:
        return self._last_result.status if self._last_result else None
