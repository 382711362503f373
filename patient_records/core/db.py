import logging
from pathlib import Path
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from .config import settings
from .base import Base

logger = logging.getLogger(__name__)

def _enable_foreign_keys(dbapi_conn, _record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()

def make_engine(url: str) -> AsyncEngine:
    eng = create_async_engine(url)
    event.listen(eng.sync_engine, "connect", _enable_foreign_keys)
    return eng

engine = make_engine(settings.DATABASE_URL)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

async def get_session():
    async with SessionLocal() as session:
        yield session

def ensure_data_dir(url: str) -> None:
    database = make_url(url).database
    if not database or database == ":memory:":
        return
    Path(database).parent.mkdir(parents=True, exist_ok=True)

async def create_schema(eng: AsyncEngine) -> None:
    # importing the models registers the table and its trigger on Base.metadata
    from patient_records.modules.records import models  # noqa: F401
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def init_models():
    ## "none" means the schema is owned outside the app.
    if settings.DB_MANAGE == "create_all":
        ensure_data_dir(settings.DATABASE_URL)
        await create_schema(engine)
        logger.info("Schema ready at %s", make_url(settings.DATABASE_URL).database)

async def close_engine():
    await engine.dispose()
