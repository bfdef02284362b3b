"""
Unit tests for backend/settings.py
"""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from application.use_cases import BatchMode, ValidationPolicy, WeightSeriesPolicy
from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "TIMEZONE",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "SUPABASE_JWT_SECRET",
    "API_KEYS",
    "SUBMISSION_VALIDATION",
    "NUTRITION_BATCH_MODE",
    "WEIGHT_SERIES_POLICY",
    "WEIGHT_SERIES_LIMIT",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.is_development

    def test_supabase_fields_default_to_none(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_key is None
        assert settings.supabase_jwt_secret is None

    def test_pipeline_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.submission_validation == ValidationPolicy.REJECT_LOCALLY
        assert settings.nutrition_batch_mode == BatchMode.TRANSACTIONAL
        assert settings.weight_series_policy == WeightSeriesPolicy.MOST_RECENT
        assert settings.weight_series_limit == 10

    def test_timezone_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.tz == ZoneInfo("UTC")


@pytest.mark.unit
class TestSettingsFromEnvironment:

    def test_policies_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUBMISSION_VALIDATION", "pass_through")
        monkeypatch.setenv("NUTRITION_BATCH_MODE", "best_effort")
        monkeypatch.setenv("WEIGHT_SERIES_POLICY", "earliest")
        monkeypatch.setenv("WEIGHT_SERIES_LIMIT", "30")

        settings = Settings(_env_file=None)

        assert settings.submission_validation == ValidationPolicy.PASS_THROUGH
        assert settings.nutrition_batch_mode == BatchMode.BEST_EFFORT
        assert settings.weight_series_policy == WeightSeriesPolicy.EARLIEST
        assert settings.weight_series_limit == 30

    def test_service_role_key_preferred(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service")
        assert Settings(_env_file=None).supabase_key == "service"

    def test_api_keys_list(self, clean_env, monkeypatch):
        monkeypatch.setenv("API_KEYS", "sk_one, sk_two,,")
        assert Settings(_env_file=None).api_keys_list == ["sk_one", "sk_two"]


@pytest.mark.unit
class TestSettingsValidation:

    def test_environment_is_normalized(self, clean_env):
        assert Settings(environment="PRODUCTION", _env_file=None).is_production

    def test_invalid_environment(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(environment="qa", _env_file=None)

    def test_invalid_timezone(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(timezone="Mars/Olympus_Mons", _env_file=None)

    def test_invalid_batch_mode(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(nutrition_batch_mode="sometimes", _env_file=None)

    @pytest.mark.parametrize("limit", [0, 366])
    def test_weight_series_limit_bounds(self, clean_env, limit):
        with pytest.raises(ValidationError):
            Settings(weight_series_limit=limit, _env_file=None)


@pytest.mark.unit
def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
