"""
Tests for environment-driven settings
"""

import pytest

from pacts.core.config import BASE_TYPES, BASIC_TYPE_CHECKS, Settings


def test_defaults(monkeypatch):
    """Test settings defaults with no environment"""
    for name in ("PACTS_ENFORCE", "PACTS_STRICT", "PACTS_LOG_LEVEL", "PACTS_HOST", "PACTS_PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.enforce is True
    assert settings.strict is False
    assert settings.log_level == "WARNING"
    assert settings.port == 8000


def test_from_env(monkeypatch):
    """Test settings read from environment variables"""
    monkeypatch.setenv("PACTS_ENFORCE", "0")
    monkeypatch.setenv("PACTS_STRICT", "true")
    monkeypatch.setenv("PACTS_LOG_LEVEL", "debug")
    monkeypatch.setenv("PACTS_PORT", "9001")
    settings = Settings.from_env()
    assert settings.enforce is False
    assert settings.strict is True
    assert settings.log_level == "DEBUG"
    assert settings.port == 9001


def test_every_base_type_has_a_predicate():
    """Test every base type has a predicate and the set is immutable"""
    assert set(BASIC_TYPE_CHECKS) == set(BASE_TYPES)
    with pytest.raises(AttributeError):
        BASE_TYPES.add("Widget")
