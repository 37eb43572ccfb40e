"""Shared fixtures: an in-memory SQLite store and a FastAPI test client."""

import os

# Must be set before the application modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal
from typing import Any, Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shared.core.database import Base, get_inventory_db
from inventory_service.app.main import app
from inventory_service.app.crud import category_crud, product_crud, supplier_crud
from inventory_service.app.schemas.category_schemas import CategoryCreate
from inventory_service.app.schemas.product_schemas import ProductCreate
from inventory_service.app.schemas.supplier_schemas import SupplierCreate


@pytest.fixture
def engine() -> Iterator[Engine]:
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_inventory_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_category(db: Session) -> Callable[..., Any]:
    def _make(name: str = "Electronics", **fields: Any):
        return category_crud.create_category(db, CategoryCreate(name=name, **fields))
    return _make


@pytest.fixture
def make_supplier(db: Session) -> Callable[..., Any]:
    def _make(name: str = "Acme", **fields: Any):
        return supplier_crud.create_supplier(db, SupplierCreate(name=name, **fields))
    return _make


@pytest.fixture
def make_product(db: Session) -> Callable[..., Any]:
    def _make(sku: str = "W-100", **fields: Any):
        data: Dict[str, Any] = {
            "name": "Widget",
            "price": Decimal("9.99"),
            "quantity": 50,
        }
        data.update(fields)
        return product_crud.create_product(db, ProductCreate(sku=sku, **data))
    return _make
