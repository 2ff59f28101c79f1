"""Domain entities and fan-out outcomes"""

from .entities import AggregateDataset, DateRange, DetailRecord, SourceResult
from .outcomes import SearchResult, SourceFetched, SourceOutcome, SourceUnavailable

__all__ = [
    "AggregateDataset",
    "DateRange",
    "DetailRecord",
    "SourceResult",
    "SearchResult",
    "SourceFetched",
    "SourceOutcome",
    "SourceUnavailable",
]
