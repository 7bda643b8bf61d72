"""Pytest configuration and fixtures."""

import os

import pytest

from build_params import PARAM_ENV_PREFIX, ParamResolver, ResolverSettings


@pytest.fixture(autouse=True)
def clean_build_param_env(monkeypatch):
    """Remove inherited BUILD_PARAM_* / BUILD_PARAMS_* variables.

    Tests that exercise the live environment set exactly what they need
    through monkeypatch.
    """
    for name in list(os.environ):
        if name.startswith(PARAM_ENV_PREFIX) or name.startswith("BUILD_PARAMS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_env() -> dict[str, str]:
    """A fake environment the resolver reads instead of os.environ."""
    return {}


@pytest.fixture
def resolver(fake_env) -> ParamResolver:
    return ParamResolver(fake_env, settings=ResolverSettings())
