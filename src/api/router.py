from fastapi import APIRouter

from src.api.auth.router import router as auth_router
from src.api.health.router import router as health_router
from src.api.images.router import router as images_router

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(images_router)
