"""
Application Use Cases for the FitTrack API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and the record store port
- Dependencies are injected via constructors for testability
- The user id is always an explicit argument
- Use cases return typed outcomes, not API responses

Usage:
    from application.use_cases import SubmitWorkoutUseCase, GetDashboardUseCase

    # Log a workout
    submit = SubmitWorkoutUseCase(store=store)
    outcome = await submit.execute(rows, user_id="user-123", notes="felt good")

    # Load the dashboard
    dashboard = GetDashboardUseCase(store=store)
    result = await dashboard.execute(user_id="user-123", day=date.today())
"""

from application.use_cases.get_dashboard import (
    DashboardResult,
    DashboardStatus,
    GetDashboardUseCase,
    WeightSeriesPolicy,
)
from application.use_cases.submission import (
    GENERIC_ERROR_MESSAGE,
    BatchMode,
    ErrorKind,
    SubmissionOutcome,
    SubmissionStatus,
    ValidationPolicy,
)
from application.use_cases.submit_nutrition import SubmitNutritionUseCase
from application.use_cases.submit_progress import SubmitProgressUseCase
from application.use_cases.submit_workout import SubmitWorkoutUseCase

__all__ = [
    # Submission
    "SubmitWorkoutUseCase",
    "SubmitNutritionUseCase",
    "SubmitProgressUseCase",
    "SubmissionOutcome",
    "SubmissionStatus",
    "ErrorKind",
    "ValidationPolicy",
    "BatchMode",
    "GENERIC_ERROR_MESSAGE",
    # Dashboard
    "GetDashboardUseCase",
    "DashboardResult",
    "DashboardStatus",
    "WeightSeriesPolicy",
]
