"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from routelog.api.v1.routes import route, workouts, view

api_router = APIRouter()

api_router.include_router(route.router, prefix="/route", tags=["Route"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["Workouts"])
api_router.include_router(view.router, tags=["View"])
