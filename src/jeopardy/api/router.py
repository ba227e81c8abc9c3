"""Main API router that aggregates all route modules."""

from fastapi import APIRouter

from jeopardy.api import board, health

api_router = APIRouter()

# Include all route modules
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(board.router, prefix="/board", tags=["board"])
