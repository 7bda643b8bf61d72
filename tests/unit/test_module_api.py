"""Tests for the module-level accessors over the live process environment."""

import logging
import os

import pytest

import build_params
from build_params import InvalidParameterError, MissingParameterError
from build_params import resolver as resolver_module


class TestModuleLevelAccessors:
    """Module-level functions read os.environ at call time."""

    def test_smoke_sample_parameters(self, monkeypatch):
        """Optional and required variants agree on the sample values."""
        monkeypatch.setenv("BUILD_PARAM_SAMPLE_STRING", "hello")
        monkeypatch.setenv("BUILD_PARAM_SAMPLE_BOOL", "true")
        monkeypatch.setenv("BUILD_PARAM_SAMPLE_INT", "42")

        assert build_params.param("sample_string") == "hello"
        assert build_params.param_bool("sample_bool") is True
        assert build_params.param_i64("sample_int") == 42

        assert build_params.param_required("sample_string") == "hello"
        assert build_params.param_bool_required("sample_bool") is True
        assert build_params.param_i64_required("sample_int") == 42

    def test_unset_parameters(self):
        assert build_params.param("test_string") is None
        assert build_params.param_bool("test_bool") is None
        assert build_params.param_i64("test_i64") is None
        assert build_params.param_u64("test_u64") is None

    def test_missing_required(self):
        with pytest.raises(MissingParameterError) as exc_info:
            build_params.param_required("missing")
        assert exc_info.value.key == "missing"

    def test_environment_changes_are_visible(self, monkeypatch):
        assert build_params.lookup("late") is None
        monkeypatch.setenv("BUILD_PARAM_LATE", "1")
        assert build_params.param_bool("late") is True
        monkeypatch.delenv("BUILD_PARAM_LATE")
        assert build_params.lookup("late") is None

    def test_unsigned_from_environment(self, monkeypatch):
        monkeypatch.setenv("BUILD_PARAM_JOBS", "8")
        assert build_params.param_u64("jobs") == 8
        assert build_params.param_u64_required("jobs") == 8

        monkeypatch.setenv("BUILD_PARAM_JOBS", "-8")
        with pytest.raises(InvalidParameterError):
            build_params.param_u64_required("jobs")

    def test_default_applied_by_caller(self, monkeypatch):
        """Callers apply their own default to optional accessors."""
        include_hash = build_params.param_bool("include_git_hash") or False
        assert include_hash is False

        monkeypatch.setenv("BUILD_PARAM_INCLUDE_GIT_HASH", "1")
        assert (build_params.param_bool("include_git_hash") or False) is True

    def test_get_resolver_is_shared(self):
        assert build_params.get_resolver() is build_params.get_resolver()


class TestDefaultResolverSettings:
    """Logging settings of the shared resolver never break parameter reads."""

    @pytest.fixture(autouse=True)
    def fresh_default_resolver(self, monkeypatch):
        monkeypatch.setattr(resolver_module, "_default_resolver", None)

    @pytest.mark.parametrize(
        "name, value",
        [("BUILD_PARAMS_LOG_LEVEL", "verbose"), ("BUILD_PARAMS_LOG_LOOKUPS", "maybe")],
    )
    def test_invalid_setting_falls_back_to_defaults(self, monkeypatch, caplog, name, value):
        monkeypatch.setenv("BUILD_PARAM_SAMPLE_STRING", "hello")
        monkeypatch.setenv("BUILD_PARAM_SAMPLE_BOOL", "1")
        monkeypatch.setenv(name, value)

        with caplog.at_level(logging.WARNING, logger="build_params"):
            assert build_params.param("sample_string") == "hello"
            assert build_params.param_bool_required("sample_bool") is True
            with pytest.raises(MissingParameterError):
                build_params.param_required("missing")

        assert "Ignoring invalid BUILD_PARAMS_* logging settings" in caplog.text

    def test_settings_read_once(self, monkeypatch, caplog):
        """Lookup logging is fixed when the shared resolver is first built."""
        monkeypatch.setenv("BUILD_PARAM_OPT_LEVEL", "3")
        build_params.get_resolver()
        monkeypatch.setenv("BUILD_PARAMS_LOG_LOOKUPS", "true")

        with caplog.at_level(logging.DEBUG, logger="build_params"):
            assert build_params.param_i64("opt_level") == 3
        assert "BUILD_PARAM_OPT_LEVEL" not in caplog.text

    def test_non_unicode_value_reads_as_unset(self, monkeypatch):
        monkeypatch.setattr(os, "environ", {"BUILD_PARAM_NAME": "caf\udce9"})
        assert build_params.param("name") is None
        with pytest.raises(MissingParameterError):
            build_params.param_required("name")
