import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.modules.vehicle_count import DashboardSession, VehicleCountService
from tests.utils.fake_repository import FakeVehicleCountRepository, fetched, unavailable

SOURCE_IDS = [1, 2, 3, 4]


@pytest.fixture(scope="session")
def app_instance():
    """The FastAPI app. ASGITransport does not run the lifespan."""
    from app.main import app

    yield app


@pytest.fixture()
def fake_repository():
    return FakeVehicleCountRepository({
        1: fetched(1, ("car", "in", 3), ("truck", "out", 2), ("car", "out", 1)),
        2: fetched(2, ("motorcycle", "in", 4), ("car", "in", 5)),
        3: fetched(3, ("truck", "in", 7)),
        4: unavailable(4),
    })


@pytest.fixture()
def dashboard_session(app_instance, fake_repository):
    service = VehicleCountService(fake_repository, SOURCE_IDS, "Asia/Bangkok")
    session = DashboardSession(service)
    app_instance.state.dashboard_session = session
    yield session
    app_instance.state.dashboard_session = None


@pytest_asyncio.fixture
async def client(app_instance, dashboard_session):
    """HTTP client bound to the ASGI app."""
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
