"""
API package for the FitTrack API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_record_store,
    get_submit_workout_use_case,
    get_submit_nutrition_use_case,
    get_submit_progress_use_case,
    get_dashboard_use_case,
    get_current_user,
)

__all__ = [
    "get_settings",
    "get_supabase_client",
    "get_supabase_client_required",
    "get_record_store",
    "get_submit_workout_use_case",
    "get_submit_nutrition_use_case",
    "get_submit_progress_use_case",
    "get_dashboard_use_case",
    "get_current_user",
]
