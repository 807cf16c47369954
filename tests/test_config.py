"""Settings tests."""

import pytest
from pydantic import ValidationError

from tasktrack.config import Settings


def test_defaults():
    settings = Settings(_env_file=None, environment="development", jwt_expiration_minutes=60)

    assert settings.jwt_algorithm == "HS256"
    assert settings.jwt_expiration_minutes == 60
    assert settings.is_development
    assert not settings.is_production


def test_production_requires_secret():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, environment="production", jwt_secret="change-me-in-production")

    settings = Settings(_env_file=None, environment="production", jwt_secret="s3cret")
    assert settings.is_production


def test_bcrypt_rounds_bounds():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, bcrypt_rounds=3)
