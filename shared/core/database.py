from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from shared.core.config import INVENTORY_DATABASE_URL, settings

Base = declarative_base()


def build_engine_options(url: str) -> dict:
    # SQLite pools (StaticPool / SingletonThreadPool) reject the queue pool options
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": settings.DB_POOL_SIZE,          # max idle connections
        "max_overflow": settings.DB_MAX_OVERFLOW,    # max temporary extra connections
        "pool_timeout": settings.DB_POOL_TIMEOUT,    # wait time before failing
    }


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE RESTRICT unless foreign keys are switched on
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


inventory_engine = create_engine(
    INVENTORY_DATABASE_URL,
    **build_engine_options(INVENTORY_DATABASE_URL)
)
InventorySessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=inventory_engine)


# Dependency


def get_inventory_db():
    db = InventorySessionLocal()
    try:
        yield db
    finally:
        db.close()
