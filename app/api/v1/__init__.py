from fastapi import APIRouter

from app.api.v1.user_group_routes import router as user_group_router

api_v1_router = APIRouter(prefix="/api/v1")

api_v1_router.include_router(user_group_router)
