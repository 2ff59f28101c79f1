"""Tabular projections for display"""

from app.modules.vehicle_count.report.table_renderer import TableProjector

__all__ = ["TableProjector"]
