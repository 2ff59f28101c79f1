"""Repository pattern for vehicle count data access"""

from abc import ABC, abstractmethod
from typing import Any

import orjson as json
from pydantic import ValidationError

from app.enums import UnavailableReasonEnum
from app.modules.vehicle_count.domain.entities import (
    DateRange,
    DetailRecord,
    SourceResult,
)
from app.modules.vehicle_count.domain.outcomes import (
    SourceFetched,
    SourceOutcome,
    SourceUnavailable,
)
from app.modules.vehicle_count.utils import get_logger

logger = get_logger()


class VehicleCountRepository(ABC):
    """Abstract repository for per-source vehicle count data"""

    @abstractmethod
    async def fetch(self, source_id: int, date_range: DateRange) -> SourceOutcome:
        """
        Fetch the records of one source for a date range.

        Implementations never raise for per-source failures, they return a
        SourceUnavailable outcome instead.
        """
        pass


class PayloadMapper:
    """Maps raw read-endpoint bodies to domain outcomes"""

    @staticmethod
    def parse(source_id: int, body: str | bytes | None) -> SourceOutcome:
        """
        Parse a response body into a SourceOutcome.

        The expected body is a JSON array whose first element holds a `data`
        array. Items of `data` are either flat records or grouped objects
        with a `details` array.
        """
        if not body:
            return SourceUnavailable(
                source_id, UnavailableReasonEnum.EMPTY_BODY, "No data from server"
            )

        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            return SourceUnavailable(
                source_id, UnavailableReasonEnum.MALFORMED, f"Invalid JSON: {exc}"
            )

        items = PayloadMapper._extract_items(payload)
        if items is None:
            return SourceUnavailable(
                source_id, UnavailableReasonEnum.MALFORMED, "Invalid data format"
            )

        records = PayloadMapper._items_to_records(source_id, items)
        return SourceFetched(SourceResult(source_id=source_id, records=records))

    @staticmethod
    def _extract_items(payload: Any) -> list | None:
        """Return the nested `data` array, or None when the shape is wrong"""
        if not isinstance(payload, list) or not payload:
            return None
        first = payload[0]
        if not isinstance(first, dict):
            return None
        items = first.get("data")
        if not isinstance(items, list):
            return None
        return items

    @staticmethod
    def _items_to_records(source_id: int, items: list) -> list[DetailRecord]:
        """Flatten items into records, skipping the ones that can't be read"""
        records = []
        for item in items:
            if not isinstance(item, dict):
                logger.warning(f"Camera {source_id}: skipping item {item!r}")
                continue
            if "details" not in item:
                PayloadMapper._append_record(source_id, records, item)
                continue
            details = item["details"] or []
            if not isinstance(details, list):
                logger.warning(f"Camera {source_id}: skipping details {details!r}")
                continue
            for detail in details:
                PayloadMapper._append_record(source_id, records, detail)
        return records

    @staticmethod
    def _append_record(source_id: int, records: list, raw: Any) -> None:
        if not isinstance(raw, dict):
            logger.warning(f"Camera {source_id}: skipping record {raw!r}")
            return
        try:
            records.append(DetailRecord(**raw))
        except ValidationError as exc:
            logger.warning(f"Camera {source_id}: skipping invalid record {raw!r}: {exc}")
