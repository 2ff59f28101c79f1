# -*- coding: utf-8 -*-
"""
Services package.

Service classes that sit between the routers and the vehicle count module.
"""
from app.services.dashboard_service import DashboardService

__all__ = ["DashboardService"]
