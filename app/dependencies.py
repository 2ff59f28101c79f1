# -*- coding: utf-8 -*-
from fastapi import HTTPException, Request, status

from app.modules.vehicle_count import DashboardSession


def get_dashboard_session(request: Request) -> DashboardSession:
    """The dashboard session created at startup"""
    session = getattr(request.app.state, "dashboard_session", None)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The dashboard is not ready yet.",
        )
    return session
