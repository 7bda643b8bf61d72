"""Typed access to build script parameters.

A build orchestrator passes declared build parameters to the build script
as ``BUILD_PARAM_<KEY>`` environment variables. This package reads them
back with explicit optional/required semantics and strict parsing.
"""

from .config import ResolverSettings
from .enums import ParamKind
from .env import EnvSource
from .errors import BuildParamError, InvalidParameterError, MissingParameterError
from .keys import PARAM_ENV_PREFIX, env_var_name, normalize_key
from .logging_setup import configure_logging
from .resolver import (
    ParamResolver,
    get_resolver,
    lookup,
    param,
    param_bool,
    param_bool_required,
    param_i64,
    param_i64_required,
    param_required,
    param_u64,
    param_u64_required,
)

__all__ = [
    "BuildParamError",
    "EnvSource",
    "InvalidParameterError",
    "MissingParameterError",
    "PARAM_ENV_PREFIX",
    "ParamKind",
    "ParamResolver",
    "ResolverSettings",
    "configure_logging",
    "env_var_name",
    "get_resolver",
    "lookup",
    "normalize_key",
    "param",
    "param_bool",
    "param_bool_required",
    "param_i64",
    "param_i64_required",
    "param_required",
    "param_u64",
    "param_u64_required",
]
