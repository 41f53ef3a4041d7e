# bots_api/api/endpoints/bots.py
from typing import List

from fastapi import APIRouter, Depends, status
from loguru import logger

from bots_api.api.validation import RequestValidator, ValidatedRequest, body, is_positive, param
from bots_api.core.database import get_db, AsyncSession
from bots_api.schemas.bot import BotRecord, DataResponse, ErrorResponse, ValidationErrorResponse, to_columns
from bots_api.services.bot_service import BotService

router = APIRouter()

BOT_DELETED = "Bot Eliminado"

# --- Validation rules ---

def _id_rules():
    return [param("id").is_int("ID no válido")]

def _name_price_rules():
    return [
        body("name")
            .not_empty("El nombre de Bot no puede ir vacío"),
        body("price")
            .is_numeric("Valor no válido")
            .not_empty("El precio de Bot no puede ir vacío")
            .custom(is_positive, "Precio no válido"),
    ]

validate_id = RequestValidator(_id_rules())
validate_create = RequestValidator(_name_price_rules())
validate_update = RequestValidator(
    _id_rules(),
    _name_price_rules() + [
        body("availability").is_boolean("Valor para disponibilidad no válido"),
    ],
)

INVALID_ID = {400: {"model": ValidationErrorResponse, "description": "Bad Request - Invalid ID"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Bot Not Found"}}


@router.get("/", response_model=DataResponse[List[BotRecord]], include_in_schema=False)
@router.get(
    "",
    response_model=DataResponse[List[BotRecord]],
    summary="Get a list of bots"
)
async def get_bots(db: AsyncSession = Depends(get_db)):
    """Return a list of bots, newest first."""
    bots = await BotService(db).list_bots()
    logger.info(f"Listing {len(bots)} bots")
    return DataResponse(data=[BotRecord.model_validate(b) for b in bots])


@router.get(
    "/{id}",
    response_model=DataResponse[BotRecord],
    responses={**INVALID_ID, **NOT_FOUND},
    summary="Get a bot by ID"
)
async def get_bot_by_id(
    req: ValidatedRequest = Depends(validate_id),
    db: AsyncSession = Depends(get_db)
):
    """Return a bot based on its unique ID."""
    bot = await BotService(db).get_bot(req.bot_id)
    return DataResponse(data=BotRecord.model_validate(bot))


@router.post("/", response_model=DataResponse[BotRecord], status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post(
    "",
    response_model=DataResponse[BotRecord],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse, "description": "Bad Request - invalid input data"}},
    summary="Creates a new bot"
)
async def create_bot(
    req: ValidatedRequest = Depends(validate_create),
    db: AsyncSession = Depends(get_db)
):
    """Returns a new record in the database."""
    bot = await BotService(db).create_bot(to_columns(req.body))
    return DataResponse(data=BotRecord.model_validate(bot))


@router.put(
    "/{id}",
    response_model=DataResponse[BotRecord],
    responses={
        400: {"model": ValidationErrorResponse, "description": "Bad Request - Invalid ID or Invalid input data"},
        **NOT_FOUND,
    },
    summary="Updates a bot with user input"
)
async def update_bot(
    req: ValidatedRequest = Depends(validate_update),
    db: AsyncSession = Depends(get_db)
):
    """Returns the updated bot."""
    logger.info(f"Attempting to update bot {req.bot_id}")
    bot = await BotService(db).update_bot(req.bot_id, to_columns(req.body))
    return DataResponse(data=BotRecord.model_validate(bot))


@router.patch(
    "/{id}",
    response_model=DataResponse[BotRecord],
    responses={**INVALID_ID, **NOT_FOUND},
    summary="Update Bot availability"
)
async def update_availability(
    req: ValidatedRequest = Depends(validate_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Flips the bot's availability. Not idempotent: calling it twice
    restores the original value.
    """
    logger.info(f"Toggling availability of bot {req.bot_id}")
    bot = await BotService(db).toggle_availability(req.bot_id)
    return DataResponse(data=BotRecord.model_validate(bot))


@router.delete(
    "/{id}",
    response_model=DataResponse[str],
    responses={**INVALID_ID, **NOT_FOUND},
    summary="Deletes a bot by a given ID"
)
async def delete_bot(
    req: ValidatedRequest = Depends(validate_id),
    db: AsyncSession = Depends(get_db)
):
    """Returns a confirmation message."""
    logger.info(f"Attempting to delete bot {req.bot_id}")
    await BotService(db).delete_bot(req.bot_id)
    return DataResponse(data=BOT_DELETED)
