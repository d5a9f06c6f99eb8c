"""Versioned API route modules."""

from fastapi import APIRouter

from pegdrop.api.routes.commit import router as commit_router
from pegdrop.api.routes.config import router as config_router
from pegdrop.api.routes.game import router as game_router
from pegdrop.api.routes.verify import router as verify_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(game_router, tags=["Game"])
api_router.include_router(commit_router, tags=["Fairness"])
api_router.include_router(verify_router, tags=["Fairness"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
