"""
Stateful callers of the use cases.

Form sessions hold the editor state of one open entry form and dashboard
views hold the last loaded summary. Both discard results that arrive after
they were closed.
"""

from application.sessions.dashboard_view import DashboardView
from application.sessions.form_session import (
    FormMessage,
    NutritionFormSession,
    ProgressFormSession,
    WorkoutFormSession,
)

__all__ = [
    "DashboardView",
    "FormMessage",
    "WorkoutFormSession",
    "NutritionFormSession",
    "ProgressFormSession",
]
