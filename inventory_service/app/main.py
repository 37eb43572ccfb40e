import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shared.core.config import settings
from shared.core.database import inventory_engine, Base
from shared.exception_handler import setup_exception_handlers

from . import models  # noqa: F401  registers the tables on Base.metadata
from .router import category_router, dashboard_router, product_router, supplier_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="Inventory Service API")

# Create all tables
Base.metadata.create_all(bind=inventory_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Include routers
app.include_router(product_router.router)
app.include_router(category_router.router)
app.include_router(supplier_router.router)
app.include_router(dashboard_router.router)
