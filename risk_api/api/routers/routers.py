# Central API router include file
from fastapi import APIRouter

from risk_api.risk.router import router as risk_router

# Create main API router
api_router = APIRouter()

api_router.include_router(risk_router)
