# bots_api/api/router.py
from fastapi import APIRouter
from bots_api.api.endpoints import bots
from bots_api.api.endpoints import health as health_endpoint


api_router = APIRouter()

api_router.include_router(bots.router, prefix="/bots", tags=["Bots"])

# Liveness probe
api_router.include_router(health_endpoint.router, prefix="/health", tags=["Health"])
