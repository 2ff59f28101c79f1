# -*- coding: utf-8 -*-
"""Integration tests for the HTTP repository against a local read endpoint."""
import asyncio
from datetime import date
from unittest.mock import patch

import orjson as json
import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from app.enums import UnavailableReasonEnum
from app.modules.vehicle_count import (
    DateRange,
    HttpVehicleCountRepository,
    SourceFetched,
    SourceUnavailable,
    VehicleCountService,
)

PATH = "/webhook/vehicle_count/all"

GOOD_BODY = json.dumps([{"data": [
    {"camera_id": 1, "details": [
        {"vehicle_type_name": "car", "direction_type_name": "in", "count": 3},
        {"vehicle_type_name": "truck", "direction_type_name": "out", "count": 2},
    ]},
]}])

PARTIAL_BODY = json.dumps([{"data": [
    {"camera_id": 5, "details": [
        {"vehicle_type_name": "car", "direction_type_name": "in", "count": 10},
        {"vehicle_type_name": None, "direction_type_name": "out"},
    ]},
]}])

# Response (status, body) per camera id
RESPONSES = {
    "1": (200, GOOD_BODY),
    "2": (500, b"internal error"),
    "3": (200, b""),
    "4": (200, b"<html>oops</html>"),
    "5": (200, PARTIAL_BODY),
}


@pytest_asyncio.fixture
async def read_endpoint():
    requests = []

    async def handler(request: web.Request) -> web.Response:
        requests.append(request.query.copy())
        status, body = RESPONSES.get(request.query.get("id"), (404, b""))
        return web.Response(status=status, body=body, content_type="application/json")

    app = web.Application()
    app.router.add_get(PATH, handler)
    server = test_utils.TestServer(app)
    await server.start_server()
    server.requests = requests
    yield server
    await server.close()


@pytest.fixture()
def date_range():
    return DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))


def make_repository(server) -> HttpVehicleCountRepository:
    return HttpVehicleCountRepository(str(server.make_url(PATH)), timeout=5)


@pytest.mark.asyncio
async def test_fetch_sends_expected_query(read_endpoint, date_range):
    repository = make_repository(read_endpoint)

    outcome = await repository.fetch(1, date_range)

    assert isinstance(outcome, SourceFetched)
    assert outcome.result.total == 5
    assert dict(read_endpoint.requests[0]) == {
        "type": "camera",
        "id": "1",
        "start": "2024-01-01",
        "stop": "2024-01-31",
    }


@pytest.mark.asyncio
async def test_fetch_passes_reversed_range_verbatim(read_endpoint):
    repository = make_repository(read_endpoint)

    await repository.fetch(1, DateRange(start=date(2024, 2, 1), end=date(2024, 1, 1)))

    assert read_endpoint.requests[0]["start"] == "2024-02-01"
    assert read_endpoint.requests[0]["stop"] == "2024-01-01"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "source_id, reason",
    [
        (2, UnavailableReasonEnum.HTTP_STATUS),
        (3, UnavailableReasonEnum.EMPTY_BODY),
        (4, UnavailableReasonEnum.MALFORMED),
    ],
)
async def test_fetch_failures_become_unavailable(read_endpoint, date_range, source_id, reason):
    repository = make_repository(read_endpoint)

    outcome = await repository.fetch(source_id, date_range)

    assert isinstance(outcome, SourceUnavailable)
    assert outcome.source_id == source_id
    assert outcome.reason == reason


@pytest.mark.asyncio
async def test_fetch_keeps_records_with_missing_fields(read_endpoint, date_range):
    repository = make_repository(read_endpoint)

    outcome = await repository.fetch(5, date_range)

    assert isinstance(outcome, SourceFetched)
    assert [
        (r.vehicle_type_name, r.direction_type_name, r.count)
        for r in outcome.result.records
    ] == [("car", "in", 10), (None, "out", 0)]


@pytest.mark.asyncio
async def test_fetch_connection_refused(date_range):
    repository = HttpVehicleCountRepository("http://127.0.0.1:1/webhook", timeout=2)

    outcome = await repository.fetch(1, date_range)

    assert isinstance(outcome, SourceUnavailable)
    assert outcome.reason == UnavailableReasonEnum.NETWORK_ERROR


@pytest.mark.asyncio
async def test_fetch_timeout(read_endpoint, date_range):
    repository = make_repository(read_endpoint)

    with patch("aiohttp.ClientSession.get", side_effect=asyncio.TimeoutError()):
        outcome = await repository.fetch(1, date_range)

    assert isinstance(outcome, SourceUnavailable)
    assert outcome.reason == UnavailableReasonEnum.NETWORK_ERROR
    assert read_endpoint.requests == []


@pytest.mark.asyncio
async def test_search_over_http_keeps_only_good_source(read_endpoint):
    service = VehicleCountService(make_repository(read_endpoint), [1, 2, 3, 4], "Asia/Bangkok")

    result = await service.search("2024-01-01", "2024-01-31")

    assert result.dataset.source_ids == [1]
    assert sorted(request["id"] for request in read_endpoint.requests) == ["1", "2", "3", "4"]
    assert [outcome.status.value for outcome in result.outcomes] == [
        "active",
        "unavailable",
        "unavailable",
        "unavailable",
    ]
