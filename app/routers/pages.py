# -*- coding: utf-8 -*-
from typing import Annotated

import jinja2
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app import config
from app.decorators import router_request
from app.dependencies import get_dashboard_session
from app.modules.vehicle_count import DashboardSession, TableProjector
from app.modules.vehicle_count.utils import DateTimeService
from app.services.dashboard_service import DashboardService

router = APIRouter(tags=["Pages"])

env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(config.HTML_TEMPLATES_DIR), autoescape=True
)
env.filters["display"] = TableProjector.display_value


@router_request(
    method="GET",
    router=router,
    path="/",
    response_class=HTMLResponse,
    include_in_schema=False,
)
async def dashboard_page(
    session: Annotated[DashboardSession, Depends(get_dashboard_session)],
    request: Request,
):
    dashboard = DashboardService.build(session)
    charts = await DashboardService.render_charts_base64(session)

    last_result = session.last_result
    if last_result is not None and last_result.date_range is not None:
        start, end = last_result.date_range.start, last_result.date_range.end
    else:
        start = end = DateTimeService.today(config.TIMEZONE)

    template = env.get_template("dashboard.html")
    html = template.render(
        dashboard=dashboard,
        charts=charts,
        start=start.isoformat(),
        end=end.isoformat(),
    )
    return HTMLResponse(content=html)
