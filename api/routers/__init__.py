"""
Router package for the FitTrack API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- workouts: Workout logging
- nutrition: Meal / food logging
- progress: Body-weight logging
- dashboard: Weight series and daily nutrition totals
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router
from api.routers.nutrition import router as nutrition_router
from api.routers.progress import router as progress_router
from api.routers.dashboard import router as dashboard_router

__all__ = [
    "health_router",
    "workouts_router",
    "nutrition_router",
    "progress_router",
    "dashboard_router",
]
