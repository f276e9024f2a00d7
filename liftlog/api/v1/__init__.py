"""API v1 router aggregation."""

from fastapi import APIRouter

from liftlog.api.v1.endpoints import dashboard, health, workouts

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
