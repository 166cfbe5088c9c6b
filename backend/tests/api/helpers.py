"""Shared helpers for API tests: test key and settings builder."""

from condo_api.config import Settings

TEST_API_KEY = "test-secret"


def make_settings(**overrides) -> Settings:
    """Settings without .env lookup, so local config never leaks into tests."""
    return Settings(api_key=TEST_API_KEY, _env_file=None, **overrides)
