"""
Test Fixtures and Helpers for the Fake Record Store.

This module provides helper functions for overriding FastAPI dependencies
with fake implementations.

Usage:
    from tests.fakes.conftest import build_test_app, override_dependency

    def test_something():
        store = FakeRecordStore()
        app = build_test_app(store, user_id="user-1")
        client = TestClient(app)

        response = client.get("/dashboard")
        assert response.status_code == 200
"""

from typing import Any, Callable, Optional

from fastapi import FastAPI

from api import deps
from backend.main import create_app
from backend.settings import Settings
from tests.fakes.record_store import FakeRecordStore

# Type for dependency getters
DepGetter = Callable[..., Any]


# =============================================================================
# Override Functions
# =============================================================================


def override_dependency(app: FastAPI, getter: DepGetter, implementation: Any) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application to override on
        getter: The dependency getter function (e.g., get_record_store)
        implementation: The fake implementation instance or factory
    """
    # Handle both direct instances and factory functions
    if callable(implementation) and not isinstance(implementation, type):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


def override_user(app: FastAPI, user_id: str) -> None:
    """Authenticate every request as ``user_id``."""

    async def mock_user() -> str:
        return user_id

    app.dependency_overrides[deps.get_current_user] = mock_user


def build_test_app(
    store: FakeRecordStore,
    *,
    user_id: Optional[str] = "test-user",
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create an app wired to ``store``.

    Args:
        store: Fake record store backing every use case
        user_id: Authenticated user for all requests; None keeps real auth
        settings: Settings for the app and the use case providers
    """
    settings = settings or Settings(environment="test", _env_file=None)
    app = create_app(settings=settings)
    override_dependency(app, deps.get_record_store, store)
    app.dependency_overrides[deps.get_settings] = lambda: settings
    if user_id is not None:
        override_user(app, user_id)
    return app


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "override_dependency",
    "override_user",
    "build_test_app",
]
