import random

import httpx
import pytest
import pytest_asyncio

from table_order.api.deps import get_order_service
from table_order.core.config import Settings
from table_order.core.cook_time import CookTimePolicy
from table_order.db.database import build_engine, build_session_factory, create_schema
from table_order.db.seed import MENU_SEED, seed_menus
from table_order.main import create_app
from table_order.services.order_service import OrderService
from tests.fakes import InMemoryMenuRepository, InMemoryOrderRepository

COOK_MIN, COOK_MAX = 5, 10


# ─── Fakes & service ───────────────────────────────────────────────────────────
@pytest.fixture
def menu_names() -> dict[int, str]:
    return dict(MENU_SEED)


@pytest.fixture
def order_repo(menu_names) -> InMemoryOrderRepository:
    return InMemoryOrderRepository(menu_names)


@pytest.fixture
def menu_repo(menu_names) -> InMemoryMenuRepository:
    return InMemoryMenuRepository(menu_names)


@pytest.fixture
def cook_time() -> CookTimePolicy:
    return CookTimePolicy(COOK_MIN, COOK_MAX, rng=random.Random(1234))


@pytest.fixture
def service(order_repo, menu_repo, cook_time) -> OrderService:
    return OrderService(orders=order_repo, menus=menu_repo, cook_time=cook_time)


# ─── HTTP app ──────────────────────────────────────────────────────────────────
@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, METRICS_ENABLED=False, DB_BOOTSTRAP=False, LOG_LEVEL="DEBUG")


@pytest.fixture
def app(settings, service):
    application = create_app(settings)
    application.dependency_overrides[get_order_service] = lambda: service
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


# ─── SQLite-backed storage ─────────────────────────────────────────────────────
@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}",
        METRICS_ENABLED=False,
    )


@pytest_asyncio.fixture
async def engine(sqlite_settings):
    eng = build_engine(sqlite_settings)
    await create_schema(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    factory = build_session_factory(engine)
    await seed_menus(factory)
    return factory
