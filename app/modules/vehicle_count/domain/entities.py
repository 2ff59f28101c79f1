"""Domain entities for vehicle count aggregation"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.modules.vehicle_count.utils.datetime import DateTimeService


class DetailRecord(BaseModel):
    """One (vehicle category, direction, count) observation for a source"""

    vehicle_type_name: Optional[str] = None
    direction_type_name: Optional[str] = None
    count: int = Field(default=0, ge=0)

    @field_validator("count", mode="before")
    @classmethod
    def null_count_is_zero(cls, value):
        return 0 if value is None else value


class SourceResult(BaseModel):
    """Records returned by one source for the queried range"""

    source_id: int
    records: list[DetailRecord]

    @property
    def total(self) -> int:
        return sum(record.count for record in self.records)


class DateRange(BaseModel):
    """Inclusive calendar date range. Start may be after end."""

    start: date
    end: date

    @classmethod
    def from_values(cls, start, end, timezone: str) -> "DateRange":
        """Build a range from user input, defaulting missing bounds to today"""
        today = DateTimeService.today(timezone)
        return cls(
            start=DateTimeService.to_date(start) if start is not None else today,
            end=DateTimeService.to_date(end) if end is not None else today,
        )

    @property
    def start_string(self) -> str:
        return self.start.isoformat()

    @property
    def end_string(self) -> str:
        return self.end.isoformat()


class AggregateDataset(BaseModel):
    """Merged results of one search, in fan-out order"""

    results: list[SourceResult] = []

    @property
    def is_empty(self) -> bool:
        return not any(result.records for result in self.results)

    @property
    def source_ids(self) -> list[int]:
        """Identifiers with data, ascending"""
        return sorted({result.source_id for result in self.results})

    @property
    def total(self) -> int:
        return sum(result.total for result in self.results)

    def records_for(self, source_id: int) -> list[DetailRecord]:
        return [
            record
            for result in self.results
            if result.source_id == source_id
            for record in result.records
        ]
