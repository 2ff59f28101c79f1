"""Category x direction cross-tabulation of vehicle counts"""

from dataclasses import dataclass, field

import pandas as pd

from app.modules.vehicle_count.domain.entities import AggregateDataset
from app.modules.vehicle_count.utils import PLACEHOLDER

CATEGORY_COLUMN = "vehicle_type_name"
DIRECTION_COLUMN = "direction_type_name"
COUNT_COLUMN = "count"
SOURCE_COLUMN = "source_id"


@dataclass(frozen=True)
class CrossTab:
    """Summed counts keyed by (category, direction), in first-seen order"""

    categories: tuple[str, ...] = ()
    directions: tuple[str, ...] = ()
    counts: dict[tuple[str, str], int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.categories

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def get(self, category: str, direction: str) -> int:
        return self.counts.get((category, direction), 0)

    def series(self) -> dict[str, list[int]]:
        """One list of counts per direction, aligned with categories"""
        return {
            direction: [self.get(category, direction) for category in self.categories]
            for direction in self.directions
        }


class DatasetMapper:
    """Maps an AggregateDataset to a flat DataFrame"""

    COLUMNS = [SOURCE_COLUMN, CATEGORY_COLUMN, DIRECTION_COLUMN, COUNT_COLUMN]

    @staticmethod
    def to_dataframe(dataset: AggregateDataset) -> pd.DataFrame:
        """One row per record, in merged order"""
        data = [
            {
                SOURCE_COLUMN: result.source_id,
                CATEGORY_COLUMN: record.vehicle_type_name,
                DIRECTION_COLUMN: record.direction_type_name,
                COUNT_COLUMN: record.count,
            }
            for result in dataset.results
            for record in result.records
        ]
        return pd.DataFrame(data, columns=DatasetMapper.COLUMNS)


class CrossTabCalculator:
    """Derives CrossTabs from an AggregateDataset. Holds no state."""

    @staticmethod
    def compute(dataset: AggregateDataset, source_id: int | None = None) -> CrossTab:
        """Cross-tab over the whole dataset, or over one source when given"""
        df = DatasetMapper.to_dataframe(dataset)
        if source_id is not None:
            df = df[df[SOURCE_COLUMN] == source_id]

        if df.empty:
            return CrossTab()

        return CrossTabCalculator._build_cross_tab(df)

    @staticmethod
    def compute_per_source(dataset: AggregateDataset) -> dict[int, CrossTab]:
        """One CrossTab per source with data, by ascending identifier"""
        return {
            source_id: CrossTabCalculator.compute(dataset, source_id)
            for source_id in dataset.source_ids
        }

    @staticmethod
    def _build_cross_tab(df: pd.DataFrame) -> CrossTab:
        df = CrossTabCalculator._fill_missing_labels(df)
        # pd.unique keeps order of appearance
        categories = tuple(pd.unique(df[CATEGORY_COLUMN]))
        directions = tuple(pd.unique(df[DIRECTION_COLUMN]))

        grouped = df.groupby([CATEGORY_COLUMN, DIRECTION_COLUMN], sort=False)[
            COUNT_COLUMN
        ].sum()
        full_index = pd.MultiIndex.from_product(
            [categories, directions], names=[CATEGORY_COLUMN, DIRECTION_COLUMN]
        )
        grouped = grouped.reindex(full_index, fill_value=0)

        counts = {
            (category, direction): int(value)
            for (category, direction), value in grouped.items()
        }
        return CrossTab(categories=categories, directions=directions, counts=counts)

    @staticmethod
    def _fill_missing_labels(df: pd.DataFrame) -> pd.DataFrame:
        # groupby drops null keys
        df = df.copy()
        for column in (CATEGORY_COLUMN, DIRECTION_COLUMN):
            present = df[column].notna() & (df[column] != "")
            df[column] = df[column].where(present, PLACEHOLDER)
        return df
