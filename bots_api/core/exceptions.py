# bots_api/core/exceptions.py
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

BOT_NOT_FOUND = "Bot No Encontrado"


class BotError(Exception):
    """Base exception for bot resource failures."""


class BotValidationError(BotError):
    """Raised when one or more request fields fail validation."""

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors


class BotNotFoundError(BotError):
    """Raised when no bot exists for the requested id."""

    def __init__(self, bot_id: int):
        super().__init__(f"Bot {bot_id} not found")
        self.bot_id = bot_id


async def validation_error_handler(request: Request, exc: BotValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} rejected with {len(exc.errors)} validation error(s)")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})


async def not_found_handler(request: Request, exc: BotNotFoundError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: bot {exc.bot_id} not found")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": BOT_NOT_FOUND})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BotValidationError, validation_error_handler)
    app.add_exception_handler(BotNotFoundError, not_found_handler)
