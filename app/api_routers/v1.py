from fastapi import APIRouter

from app.features.accessibility.routes.analysis import router as accessibility_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(accessibility_router)
