"""
FastAPI Dependency Providers for the FitTrack API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and the async Supabase client are cached per-process
- Record store and use case providers create new instances per-request
- Auth providers wrap the Supabase JWT / API key logic in backend.auth

Usage in routers:
    from api.deps import get_current_user, get_submit_workout_use_case

    @router.post("/workouts")
    async def log_workout(
        user_id: str = Depends(get_current_user),
        use_case: SubmitWorkoutUseCase = Depends(get_submit_workout_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_record_store] = lambda: FakeRecordStore()
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import AsyncClient, acreate_client

# Protocol types (interfaces)
from application.ports import RecordStore
from application.use_cases import (
    GetDashboardUseCase,
    SubmitNutritionUseCase,
    SubmitProgressUseCase,
    SubmitWorkoutUseCase,
)

# Concrete implementations
from infrastructure import SupabaseRecordStore

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================

_supabase_client: Optional[AsyncClient] = None


async def get_supabase_client() -> Optional[AsyncClient]:
    """
    Get async Supabase client instance (cached).

    Creates the client on first use with credentials from settings and
    reuses it for the lifetime of the process. Returns None if credentials
    are not configured.

    Returns:
        AsyncClient: Supabase client instance, or None if not configured
    """
    global _supabase_client
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    if _supabase_client is None:
        _supabase_client = await acreate_client(settings.supabase_url, settings.supabase_key)
    return _supabase_client


async def get_supabase_client_required(
    client: Optional[AsyncClient] = Depends(get_supabase_client),
) -> AsyncClient:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.
    Raises HTTPException 503 if database is not available.

    Returns:
        AsyncClient: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Record Store Provider
# =============================================================================


def get_record_store(
    client: AsyncClient = Depends(get_supabase_client_required),
) -> RecordStore:
    """
    Get RecordStore implementation.

    Returns a SupabaseRecordStore instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)

    Returns:
        RecordStore: Store for workouts, nutrition logs and progress entries
    """
    return SupabaseRecordStore(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_submit_workout_use_case(
    store: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> SubmitWorkoutUseCase:
    """Get SubmitWorkoutUseCase with injected store and validation policy."""
    return SubmitWorkoutUseCase(store, validation=settings.submission_validation)


def get_submit_nutrition_use_case(
    store: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> SubmitNutritionUseCase:
    """Get SubmitNutritionUseCase with injected store, validation and batch mode."""
    return SubmitNutritionUseCase(
        store,
        validation=settings.submission_validation,
        batch_mode=settings.nutrition_batch_mode,
    )


def get_submit_progress_use_case(
    store: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> SubmitProgressUseCase:
    """Get SubmitProgressUseCase with injected store and validation policy."""
    return SubmitProgressUseCase(store, validation=settings.submission_validation)


def get_dashboard_use_case(
    store: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> GetDashboardUseCase:
    """Get GetDashboardUseCase configured from settings."""
    return GetDashboardUseCase(
        store,
        weight_series_policy=settings.weight_series_policy,
        weight_series_limit=settings.weight_series_limit,
        tz=settings.tz,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports:
    - Supabase access token (HS256)
    - API key authentication ("key:user_id")

    Args:
        authorization: Bearer token header
        x_api_key: API key header

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    "get_record_store",
    # Use cases
    "get_submit_workout_use_case",
    "get_submit_nutrition_use_case",
    "get_submit_progress_use_case",
    "get_dashboard_use_case",
    # Authentication
    "get_current_user",
]
