"""Flat tabular projection of the merged dataset."""

import pandas as pd

from app.modules.vehicle_count.analytics.calculators.cross_tab import (
    SOURCE_COLUMN,
    DatasetMapper,
)
from app.modules.vehicle_count.domain.entities import AggregateDataset
from app.modules.vehicle_count.utils import PLACEHOLDER


class TableProjector:
    """Builds the (source, category, direction, count) table."""

    @staticmethod
    def to_dataframe(dataset: AggregateDataset) -> pd.DataFrame:
        """Rows ordered by numeric source id; records keep their order within a source"""
        df = DatasetMapper.to_dataframe(dataset)
        if df.empty:
            return df
        return df.sort_values(
            SOURCE_COLUMN, key=lambda ids: ids.astype(int), kind="stable"
        ).reset_index(drop=True)

    @staticmethod
    def rows(dataset: AggregateDataset) -> list[dict]:
        return TableProjector.to_dataframe(dataset).to_dict(orient="records")

    @staticmethod
    def display_value(value) -> str:
        """Text shown in a table cell, empty values become a placeholder"""
        if value is None or value == "":
            return PLACEHOLDER
        return str(value)
