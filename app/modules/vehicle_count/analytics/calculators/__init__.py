from app.modules.vehicle_count.analytics.calculators.cross_tab import (
    CrossTab,
    CrossTabCalculator,
    DatasetMapper,
)

__all__ = ["CrossTab", "CrossTabCalculator", "DatasetMapper"]
