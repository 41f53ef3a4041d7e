from sqlalchemy.ext.asyncio import create_async_engine,async_sessionmaker,AsyncSession
from sqlalchemy.orm import declarative_base
from sqlalchemy import text
from bots_api.core.config import settings
from loguru import logger
import asyncio
from typing import AsyncGenerator

Base=declarative_base()

async_engine=None
AsyncSessionLocal=None

def _engine_options() -> dict:
    options = {
        "echo": settings.DATABASE_ECHO_SQL,
        "pool_pre_ping": True, # Ensures connections are alive
    }
    # SQLite has no server-side pool to size
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        )
    return options

async def init_db():
    """
    Initializes the database engine and creates tables if they don't exist.
    Retries the connection a configurable number of times so the API can
    start before the database container is ready.
    """
    global async_engine,AsyncSessionLocal
    if async_engine is not None:
        logger.info("Database engine already initialized.")
        return

    # Register the models on Base.metadata before create_all
    from bots_api.models import bot  # noqa: F401

    max_retries=settings.DATABASE_CONNECT_RETRIES
    retry_delay=settings.DATABASE_RETRY_DELAY

    for i in range(max_retries):
        engine=None
        try:
            engine = create_async_engine(settings.DATABASE_URL, **_engine_options())

            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(Base.metadata.create_all)

            async_engine = engine
            AsyncSessionLocal = async_sessionmaker(
                autocommit=False,
                autoflush=False,
                bind=async_engine,
                class_=AsyncSession,
                expire_on_commit=False # Prevents objects from expiring after commit
            )

            logger.info("Database tables initialized successfully (or already existed).")
            break # Exit loop if successful

        except Exception as e:
            if engine is not None:
                await engine.dispose()
            logger.error(f"Failed to connect to database or create tables (Attempt {i+1}/{max_retries}): {e}")
            if i < max_retries - 1:
                logger.info(f"Retrying database connection in {retry_delay} seconds...")
                await asyncio.sleep(retry_delay)
            else:
                logger.critical("Maximum database connection retries reached. Exiting startup.")
                raise

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides an asynchronous database session.
    It ensures the session is closed after the request.
    """
    if AsyncSessionLocal is None:
        logger.error("AsyncSessionLocal is not initialized. Calling init_db...")
        await init_db()
        if AsyncSessionLocal is None:
            raise RuntimeError("Database session local could not be initialized.")

    db = AsyncSessionLocal()
    try:
        yield db
    finally:
        await db.close()


async def dispose_db():
    """Disposes the database engine connections."""
    global async_engine,AsyncSessionLocal
    if async_engine:
        await async_engine.dispose()
        logger.info("Database engine connections disposed.")
    async_engine=None
    AsyncSessionLocal=None
