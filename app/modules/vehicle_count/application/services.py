"""Application services for vehicle count searches"""

import asyncio
from typing import Iterable, Sequence

from app.enums import SearchStatusEnum
from app.modules.vehicle_count.domain.entities import AggregateDataset, DateRange
from app.modules.vehicle_count.domain.outcomes import (
    SearchResult,
    SourceFetched,
    SourceOutcome,
)
from app.modules.vehicle_count.repositories import VehicleCountRepository
from app.modules.vehicle_count.utils import (
    FAILURE_NOTICE,
    NO_DATA_NOTICE,
    get_logger,
)

logger = get_logger()


class VehicleCountService:
    """Fans a date range out to every source, then merges what came back"""

    def __init__(
        self,
        repository: VehicleCountRepository,
        source_ids: Sequence[int],
        timezone: str,
    ):
        self.repository = repository
        self.source_ids = list(source_ids)
        self.timezone = timezone

    async def fetch_all(self, date_range: DateRange) -> list[SourceOutcome]:
        """Issue one request per source concurrently and wait for all of them"""
        awaitables = [
            self.repository.fetch(source_id, date_range)
            for source_id in self.source_ids
        ]
        return list(await asyncio.gather(*awaitables))

    @staticmethod
    def merge(outcomes: Iterable[SourceOutcome]) -> AggregateDataset:
        """Drop unavailable and empty sources, keep the rest in fan-out order"""
        results = [
            outcome.result
            for outcome in outcomes
            if isinstance(outcome, SourceFetched) and outcome.result.records
        ]
        return AggregateDataset(results=results)

    async def search(self, start=None, end=None) -> SearchResult:
        """
        Run the fetch-merge pipeline for a date range.

        Args:
            start: Start date (date, datetime or YYYY-MM-DD string), today if None
            end: End date, today if None

        Returns:
            SearchResult: `ok` with data, `no_data` when nothing came back,
            `failed` with an empty dataset when the pipeline itself raised.
        """
        try:
            date_range = DateRange.from_values(start, end, self.timezone)
            logger.info(
                f"Searching vehicle counts from {date_range.start_string} "
                f"to {date_range.end_string} for cameras {self.source_ids}"
            )
            outcomes = await self.fetch_all(date_range)
        except Exception:
            logger.exception("Vehicle count search failed")
            return SearchResult(
                status=SearchStatusEnum.FAILED,
                dataset=AggregateDataset(),
                notice=FAILURE_NOTICE,
            )

        dataset = self.merge(outcomes)
        if dataset.is_empty:
            logger.info("No vehicle count data in the selected range")
            return SearchResult(
                status=SearchStatusEnum.NO_DATA,
                dataset=dataset,
                outcomes=tuple(outcomes),
                notice=NO_DATA_NOTICE,
                date_range=date_range,
            )

        logger.info(
            f"Merged {dataset.total} vehicles from cameras {dataset.source_ids}"
        )
        return SearchResult(
            status=SearchStatusEnum.OK,
            dataset=dataset,
            outcomes=tuple(outcomes),
            date_range=date_range,
        )
