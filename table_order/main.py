"""
Table Order Service — FastAPI entrypoint
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from table_order.api import health, orders
from table_order.api.errors import register_exception_handlers
from table_order.core.config import Settings, get_settings
from table_order.core.cook_time import CookTimePolicy
from table_order.core.logging import configure_logging
from table_order.db.database import build_engine, build_session_factory, create_schema
from table_order.db.seed import seed_menus
from table_order.repositories.menu_repository import SqlMenuRepository
from table_order.repositories.order_repository import SqlOrderRepository
from table_order.services.order_service import OrderService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)
        if settings.DB_BOOTSTRAP:
            await create_schema(engine)
            await seed_menus(session_factory)

        app.state.engine = engine
        app.state.order_service = OrderService(
            orders=SqlOrderRepository(session_factory),
            menus=SqlMenuRepository(session_factory),
            cook_time=CookTimePolicy.from_settings(settings),
        )
        logger.info(
            "Connection pool ready (size=%d), cook time %d..%d min",
            settings.POSTGRES_POOL_SIZE, settings.COOK_TIME_MIN_MINUTES, settings.COOK_TIME_MAX_MINUTES,
        )
        yield
        await engine.dispose()

    app = FastAPI(
        title="Table Order Service",
        description="Table-side ordering: place, list, inspect and cancel orders per table.",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
    )
    app.state.settings = settings

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True,
                       allow_methods=["*"], allow_headers=["*"])

    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    register_exception_handlers(app)
    app.include_router(orders.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        return {"service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}

    return app


def serve() -> None:
    settings = get_settings()
    logger.info("Server running at http://%s:%d/", settings.HOST, settings.PORT)
    # uvicorn calls the factory; this module holds no app instance
    uvicorn.run("table_order.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)
