# bots_api/api/endpoints/health.py
from fastapi import APIRouter

from bots_api.schemas.bot import DataResponse

router = APIRouter()

@router.get("", response_model=DataResponse[str])
async def health():
    return DataResponse(data="ok")
