"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- entries: Workout, nutrition and progress submission models
- dashboard: Dashboard summary response
"""

from api.schemas.dashboard import DashboardResponse
from api.schemas.entries import (
    ExerciseRowIn,
    FoodRowIn,
    NutritionSubmitRequest,
    ProgressSubmitRequest,
    SubmissionResponse,
    WorkoutSubmitRequest,
)

__all__ = [
    "ExerciseRowIn",
    "FoodRowIn",
    "WorkoutSubmitRequest",
    "NutritionSubmitRequest",
    "ProgressSubmitRequest",
    "SubmissionResponse",
    "DashboardResponse",
]
