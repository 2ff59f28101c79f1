import asyncio

import pytest

from app.enums import SearchStatusEnum, SourceStatusEnum, UnavailableReasonEnum
from app.modules.vehicle_count import (
    DashboardSession,
    SearchInProgressError,
    VehicleCountService,
)
from tests.utils.fake_repository import FakeVehicleCountRepository, fetched, unavailable

SOURCE_IDS = [1, 2, 3, 4]


def make_session(outcomes, **kwargs):
    repository = FakeVehicleCountRepository(outcomes, **kwargs)
    service = VehicleCountService(repository, SOURCE_IDS, "Asia/Bangkok")
    return DashboardSession(service)


class ExplodingService:
    source_ids = SOURCE_IDS

    async def search(self, start=None, end=None):
        raise RuntimeError("boom")


class FailingAfterFirstService(VehicleCountService):
    """Real search the first time, raises on every later call"""

    async def search(self, start=None, end=None):
        if self.repository.calls:
            raise RuntimeError("boom")
        return await super().search(start, end)


def test_new_session_is_idle_and_empty():
    session = make_session({})

    assert session.busy is False
    assert session.dataset.is_empty
    assert session.status is None
    assert session.table_rows() == []
    assert session.cross_tab().is_empty
    assert [s["status"] for s in session.source_statuses()] == [SourceStatusEnum.NO_DATA] * 4


@pytest.mark.asyncio
async def test_run_search_replaces_dataset():
    session = make_session({1: fetched(1, ("car", "in", 3))})

    result = await session.run_search("2024-01-01", "2024-01-02")

    assert result.status == SearchStatusEnum.OK
    assert session.dataset is result.dataset
    assert session.last_result is result
    assert session.status == SearchStatusEnum.OK
    assert session.cross_tab().get("car", "in") == 3
    assert session.busy is False


@pytest.mark.asyncio
async def test_no_data_search_clears_previous_dataset():
    session = make_session({1: fetched(1, ("car", "in", 3))})
    await session.run_search("2024-01-01", "2024-01-02")

    session.service.repository.outcomes = {}
    result = await session.run_search("2024-02-01", "2024-02-02")

    assert result.status == SearchStatusEnum.NO_DATA
    assert session.dataset.is_empty
    assert session.table_rows() == []


@pytest.mark.asyncio
async def test_busy_during_search_and_overlap_rejected():
    session = make_session({1: fetched(1, ("car", "in", 3))}, delay=0.05)

    task = asyncio.create_task(session.run_search("2024-01-01", "2024-01-02"))
    await asyncio.sleep(0.01)

    assert session.busy is True
    with pytest.raises(SearchInProgressError):
        await session.run_search("2024-01-01", "2024-01-02")

    await task
    assert session.busy is False
    # Rejected search did not reach the repository
    assert len(session.service.repository.calls) == 4


@pytest.mark.asyncio
async def test_busy_released_when_search_raises():
    session = DashboardSession(ExplodingService())

    with pytest.raises(RuntimeError):
        await session.run_search()

    assert session.busy is False
    assert session.dataset.is_empty


@pytest.mark.asyncio
async def test_raising_search_forgets_previous_result():
    repository = FakeVehicleCountRepository({1: fetched(1, ("car", "in", 3))})
    session = DashboardSession(
        FailingAfterFirstService(repository, SOURCE_IDS, "Asia/Bangkok")
    )
    await session.run_search("2024-01-01", "2024-01-02")
    assert session.status == SearchStatusEnum.OK

    with pytest.raises(RuntimeError):
        await session.run_search("2024-02-01", "2024-02-02")

    assert session.dataset.is_empty
    assert session.last_result is None
    assert session.status is None
    assert [s["status"] for s in session.source_statuses()] == [SourceStatusEnum.NO_DATA] * 4


@pytest.mark.asyncio
async def test_busy_released_on_failed_search():
    session = make_session({})

    result = await session.run_search("garbage", None)

    assert result.status == SearchStatusEnum.FAILED
    assert session.busy is False


@pytest.mark.asyncio
async def test_source_statuses_follow_last_outcomes():
    session = make_session({
        1: fetched(1, ("car", "in", 3)),
        3: unavailable(3, UnavailableReasonEnum.NETWORK_ERROR),
    })

    await session.run_search("2024-01-01", "2024-01-02")

    assert session.source_statuses() == [
        {"source_id": 1, "status": SourceStatusEnum.ACTIVE, "reason": None},
        {"source_id": 2, "status": SourceStatusEnum.NO_DATA, "reason": None},
        {"source_id": 3, "status": SourceStatusEnum.UNAVAILABLE, "reason": UnavailableReasonEnum.NETWORK_ERROR},
        {"source_id": 4, "status": SourceStatusEnum.NO_DATA, "reason": None},
    ]


@pytest.mark.asyncio
async def test_per_source_cross_tabs_only_for_sources_with_data():
    session = make_session({
        2: fetched(2, ("car", "in", 5)),
        4: fetched(4, ("truck", "out", 1)),
    })

    await session.run_search("2024-01-01", "2024-01-02")

    assert list(session.cross_tabs_per_source()) == [2, 4]


@pytest.mark.asyncio
async def test_two_cameras_up_two_down():
    session = make_session({
        1: fetched(1, ("car", "in", 3)),
        2: fetched(2, ("car", "in", 5)),
        3: unavailable(3),
        4: unavailable(4, UnavailableReasonEnum.NETWORK_ERROR),
    })

    result = await session.run_search("2024-01-01", "2024-01-31")

    assert result.status == SearchStatusEnum.OK
    assert result.notice is None
    cross_tab = session.cross_tab()
    assert cross_tab.categories == ("car",)
    assert cross_tab.directions == ("in",)
    assert cross_tab.counts == {("car", "in"): 8}
    assert session.table_rows() == [
        {"source_id": 1, "vehicle_type_name": "car", "direction_type_name": "in", "count": 3},
        {"source_id": 2, "vehicle_type_name": "car", "direction_type_name": "in", "count": 5},
    ]
    assert [s["status"] for s in session.source_statuses()] == [
        SourceStatusEnum.ACTIVE,
        SourceStatusEnum.ACTIVE,
        SourceStatusEnum.UNAVAILABLE,
        SourceStatusEnum.UNAVAILABLE,
    ]
