"""Per-source fan-out outcomes and the result of a whole search"""

from dataclasses import dataclass, field
from typing import Optional, Union

from app.enums import SearchStatusEnum, SourceStatusEnum, UnavailableReasonEnum
from app.modules.vehicle_count.domain.entities import (
    AggregateDataset,
    DateRange,
    SourceResult,
)


@dataclass(frozen=True)
class SourceFetched:
    """A source answered with a well-formed payload"""

    result: SourceResult

    @property
    def source_id(self) -> int:
        return self.result.source_id

    @property
    def status(self) -> SourceStatusEnum:
        if self.result.records:
            return SourceStatusEnum.ACTIVE
        return SourceStatusEnum.NO_DATA


@dataclass(frozen=True)
class SourceUnavailable:
    """A source failed and is excluded from the merge"""

    source_id: int
    reason: UnavailableReasonEnum
    detail: str = ""

    @property
    def status(self) -> SourceStatusEnum:
        return SourceStatusEnum.UNAVAILABLE


SourceOutcome = Union[SourceFetched, SourceUnavailable]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search: new dataset, per-source outcomes and a notice"""

    status: SearchStatusEnum
    dataset: AggregateDataset = field(default_factory=AggregateDataset)
    outcomes: tuple = ()
    notice: Optional[str] = None
    date_range: Optional[DateRange] = None
