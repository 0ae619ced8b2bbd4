import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from commerce_services.applications.interfaces.dtos.message import HomeInfo
from commerce_services.infrastructure.config.settings import Settings
from commerce_services.infrastructure.logging.logger import Logger, setup_logging
from commerce_services.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from commerce_services.presentation.error_handlers import register_exception_handlers
from commerce_services.presentation.routers import (
    api_objects,
    orders_v1,
    orders_v2,
    products_v1,
    products_v2,
    users_v1,
    users_v2,
)

setup_logging({"aiosqlite": logging.WARNING})
logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    if settings.STORAGE_BACKEND == "sqlalchemy":
        await create_tables(get_engine())
    logger.info(f"Commerce services started with {settings.STORAGE_BACKEND} storage")
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Commerce Services", version="1.0.0", lifespan=lifespan)
register_exception_handlers(app)

app.include_router(products_v1.router)
app.include_router(products_v2.router)
app.include_router(users_v1.router)
app.include_router(users_v2.router)
app.include_router(orders_v1.router)
app.include_router(orders_v2.router)
app.include_router(api_objects.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=HomeInfo)
def read_root():
    return HomeInfo(
        application="Commerce Services",
        version=app.version,
        status="running",
        endpoints={
            "docs": "/docs",
            "products": "/api/v1/products, /api/v2/products",
            "users": "/api/v1/users, /api/v2/users",
            "orders": "/api/v1/orders, /api/v2/orders",
            "objects": "/api/objects",
        },
    )
