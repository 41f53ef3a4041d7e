import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from loguru import logger
from bots_api.core.config import settings
from bots_api.core.database import init_db, dispose_db
from bots_api.core.exceptions import register_exception_handlers
from bots_api.api.router import api_router


def configure_logging():
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles startup and shutdown events for the FastAPI application.
    The database must be reachable before the API starts serving requests.
    """
    configure_logging()
    logger.info("Bots REST API starting up (Lifespan event)...")

    await init_db()
    logger.info("Database startup initialization complete.")

    yield

    logger.info("Bots REST API shutting down (Lifespan event)...")
    await dispose_db()


app=FastAPI(
    title="REST API FastAPI / SQLAlchemy",
    description="API Docs for Bots",
    version="1.0.0",
    openapi_tags=[
        {"name": "Bots", "description": "API operations related to bots"},
        {"name": "Health", "description": "Service liveness"},
    ],
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router,prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    logger.info(f"REST API en el puerto {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
