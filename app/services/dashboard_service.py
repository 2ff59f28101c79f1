# -*- coding: utf-8 -*-
"""
Dashboard service.

Turns the current dashboard session into API payloads and chart images.
Every call recomputes projections from the session's current dataset.
"""
import asyncio
import base64
from typing import Dict, Optional

from app.modules.vehicle_count import BarChartVisualizer, DashboardSession
from app.modules.vehicle_count.config import ChartConfig
from app.pydantic_models import (
    CountRowOut,
    CrossTabOut,
    DashboardOut,
    SearchOut,
    SourcePanelOut,
    SourceStatusOut,
)


class DashboardService:
    """Service for building dashboard views."""

    @staticmethod
    def build(
        session: DashboardSession, source_id: Optional[int] = None
    ) -> DashboardOut:
        """
        Build the dashboard payload from the session snapshot.

        Args:
            session: The dashboard session
            source_id: Restrict the combined cross-tab to one source

        Returns:
            DashboardOut: Table rows, combined cross-tab and per-source panels
        """
        return DashboardOut(**DashboardService._payload(session, source_id))

    @staticmethod
    def build_search(session: DashboardSession, notice: Optional[str]) -> SearchOut:
        return SearchOut(**DashboardService._payload(session, None), notice=notice)

    @staticmethod
    def _payload(session: DashboardSession, source_id: Optional[int]) -> dict:
        dataset = session.dataset
        return {
            "busy": session.busy,
            "status": session.status,
            "active_sources": dataset.source_ids,
            "sources": [
                SourceStatusOut(**source) for source in session.source_statuses()
            ],
            "rows": [CountRowOut(**row) for row in session.table_rows()],
            "cross_tab": CrossTabOut.from_cross_tab(session.cross_tab(source_id)),
            "panels": [
                SourcePanelOut(
                    source_id=panel_source_id,
                    cross_tab=CrossTabOut.from_cross_tab(cross_tab),
                )
                for panel_source_id, cross_tab in session.cross_tabs_per_source().items()
            ],
        }

    @staticmethod
    async def render_chart(
        session: DashboardSession, source_id: Optional[int] = None
    ) -> Optional[bytes]:
        """Render one bar chart off the event loop, None when there is no data"""
        cross_tab = session.cross_tab(source_id)
        title = (
            ChartConfig.SOURCE_TITLE.format(source_id=source_id)
            if source_id is not None
            else ChartConfig.DEFAULT_TITLE
        )
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, BarChartVisualizer.plot_cross_tab, cross_tab, title
        )

    @staticmethod
    async def render_charts_base64(session: DashboardSession) -> Dict[str, str]:
        """
        Render the combined chart and one chart per source as base64 PNGs.

        Returns:
            Dict[str, str]: "all" and each source id (as str) mapped to the
            encoded image. Sources without data are left out.
        """
        charts = {}
        for key, source_id in [("all", None)] + [
            (str(source_id), source_id) for source_id in session.dataset.source_ids
        ]:
            png = await DashboardService.render_chart(session, source_id)
            if png is not None:
                charts[key] = base64.b64encode(png).decode("ascii")
        return charts
