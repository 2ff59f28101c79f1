# -*- coding: utf-8 -*-
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response

from app.decorators import router_request
from app.dependencies import get_dashboard_session
from app.modules.vehicle_count import DashboardSession
from app.pydantic_models import BusyOut, DashboardOut, SearchIn, SearchOut
from app.services.dashboard_service import DashboardService

router = APIRouter(
    prefix="/vehicle-counts",
    tags=["Vehicle counts"],
    responses={
        429: {"error": "Rate limit exceeded"},
    },
)


@router_request(method="GET", router=router, path="", response_model=DashboardOut)
async def get_dashboard(
    session: Annotated[DashboardSession, Depends(get_dashboard_session)],
    request: Request,
    source_id: Optional[int] = None,
):
    return DashboardService.build(session, source_id)


@router_request(
    method="POST",
    router=router,
    path="/search",
    response_model=SearchOut,
    responses={409: {"description": "A search is already in progress."}},
)
async def search_vehicle_counts(
    data: SearchIn,
    session: Annotated[DashboardSession, Depends(get_dashboard_session)],
    request: Request,
):
    result = await session.run_search(data.start, data.end)
    return DashboardService.build_search(session, result.notice)


@router_request(method="GET", router=router, path="/status", response_model=BusyOut)
async def get_search_status(
    session: Annotated[DashboardSession, Depends(get_dashboard_session)],
    request: Request,
):
    return BusyOut(busy=session.busy)


@router_request(
    method="GET",
    router=router,
    path="/chart.png",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}},
        404: {"description": "No data to plot."},
    },
)
async def get_chart(
    session: Annotated[DashboardSession, Depends(get_dashboard_session)],
    request: Request,
    source_id: Optional[int] = None,
):
    png = await DashboardService.render_chart(session, source_id)
    if png is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No data to plot")
    return Response(content=png, media_type="image/png")
