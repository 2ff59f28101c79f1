# -*- coding: utf-8 -*-
from typing import List, Optional

from pydantic import BaseModel

from app.enums import SearchStatusEnum, SourceStatusEnum, UnavailableReasonEnum
from app.modules.vehicle_count import CrossTab


class HealthCheck(BaseModel):
    status: str


class SearchIn(BaseModel):
    # Kept as raw strings: malformed dates are a pipeline failure, not a 422
    start: Optional[str] = None
    end: Optional[str] = None


class BusyOut(BaseModel):
    busy: bool


class CountRowOut(BaseModel):
    source_id: int
    vehicle_type_name: Optional[str] = None
    direction_type_name: Optional[str] = None
    count: int


class DirectionSeriesOut(BaseModel):
    direction: str
    counts: List[int]


class CrossTabOut(BaseModel):
    categories: List[str]
    directions: List[str]
    series: List[DirectionSeriesOut]
    total: int

    @classmethod
    def from_cross_tab(cls, cross_tab: CrossTab) -> "CrossTabOut":
        return cls(
            categories=list(cross_tab.categories),
            directions=list(cross_tab.directions),
            series=[
                DirectionSeriesOut(direction=direction, counts=counts)
                for direction, counts in cross_tab.series().items()
            ],
            total=cross_tab.total,
        )


class SourceStatusOut(BaseModel):
    source_id: int
    status: SourceStatusEnum
    reason: Optional[UnavailableReasonEnum] = None


class SourcePanelOut(BaseModel):
    source_id: int
    cross_tab: CrossTabOut


class DashboardOut(BaseModel):
    busy: bool
    status: Optional[SearchStatusEnum] = None
    active_sources: List[int]
    sources: List[SourceStatusOut]
    rows: List[CountRowOut]
    cross_tab: CrossTabOut
    panels: List[SourcePanelOut]


class SearchOut(DashboardOut):
    notice: Optional[str] = None
