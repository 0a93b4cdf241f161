"""API 라우터"""
from fastapi import APIRouter

from bookpoint_api.api.routes import health

api_router = APIRouter()

# 상태 점검 라우트 (/health)
api_router.include_router(health.router, tags=["health"])
