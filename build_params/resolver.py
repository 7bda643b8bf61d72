"""Typed accessors for build script parameters.

The build orchestrator exports every entry of the package's declared build
parameters as ``BUILD_PARAM_<KEY>`` before running the build script. This
module reads those variables back as strings, booleans, or 64-bit integers.

Each kind has two accessors:
- ``param_<kind>(key)`` returns ``None`` when the parameter is unset, so the
  caller can apply its own default.
- ``param_<kind>_required(key)`` raises ``MissingParameterError`` instead.

A value that is set but malformed always raises ``InvalidParameterError``;
it is never silently replaced by a default.

Example (inside a build script):

    from build_params import param_bool, param_required

    include_hash = param_bool("include_git_hash") or False
    output_dir = param_required("output_dir")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TypeVar

from pydantic import ValidationError

from build_params.config import ResolverSettings
from build_params.enums import ParamKind
from build_params.env import EnvLookup, EnvSource, as_env_source
from build_params.errors import InvalidParameterError, MissingParameterError
from build_params.keys import PARAM_ENV_PREFIX, env_var_name
from build_params.logging_setup import display_value
from build_params.parsing import parse_bool, parse_i64, parse_u64

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ParamResolver:
    """Resolves logical parameter keys against an environment source.

    The resolver holds no state besides its environment source and logging
    flags. Every call re-reads the environment; nothing is cached.
    """

    def __init__(
        self,
        env: EnvSource | Mapping[str, str] | EnvLookup | None = None,
        *,
        prefix: str = PARAM_ENV_PREFIX,
        settings: ResolverSettings | None = None,
    ) -> None:
        """Create a resolver.

        Args:
            env: Environment to read from. ``None`` reads ``os.environ`` at
                call time; a mapping or lookup function acts as a fake
                environment.
            prefix: Variable name prefix. Defaults to ``BUILD_PARAM_``.
            settings: Logging settings. Loaded from the environment if omitted;
                invalid BUILD_PARAMS_* values fall back to the defaults.
        """
        self._env = as_env_source(env)
        self._prefix = prefix
        settings = settings or _load_settings()
        self._log_lookups = settings.log_lookups
        self._redact = settings.redact_sensitive

    @property
    def prefix(self) -> str:
        return self._prefix

    def env_var_name(self, key: str) -> str:
        return env_var_name(key, self._prefix)

    def lookup(self, key: str) -> str | None:
        """Return the raw value for ``key``, or ``None`` if it is unset."""
        name = self.env_var_name(key)
        value = self._env.get(name)
        if self._log_lookups:
            if value is None:
                logger.debug("Build parameter %s (%s) is not set", key, name)
            else:
                logger.debug(
                    "Build parameter %s (%s) = %r",
                    key,
                    name,
                    display_value(key, value, redact=self._redact),
                )
        return value

    def _require(self, key: str, value: T | None) -> T:
        if value is None:
            raise MissingParameterError(key, env_var=self.env_var_name(key))
        return value

    def _parsed(
        self,
        key: str,
        kind: ParamKind,
        parser: Callable[[str], T | None],
    ) -> T | None:
        raw = self.lookup(key)
        if raw is None:
            return None
        value = parser(raw)
        if value is None:
            raise InvalidParameterError(
                key, kind, raw, env_var=self.env_var_name(key)
            )
        return value

    # String

    def param(self, key: str) -> str | None:
        """Read an optional string parameter."""
        return self.lookup(key)

    def param_required(self, key: str) -> str:
        """Read a required string parameter.

        Raises:
            MissingParameterError: If the parameter is not set.
        """
        return self._require(key, self.lookup(key))

    # Boolean

    def param_bool(self, key: str) -> bool | None:
        """Read an optional boolean parameter.

        Accepts exactly ``"true"``/``"1"`` and ``"false"``/``"0"``.

        Raises:
            InvalidParameterError: If the value is any other token.
        """
        return self._parsed(key, ParamKind.BOOLEAN, parse_bool)

    def param_bool_required(self, key: str) -> bool:
        return self._require(key, self.param_bool(key))

    # Signed integer

    def param_i64(self, key: str) -> int | None:
        """Read an optional signed 64-bit integer parameter.

        Raises:
            InvalidParameterError: If the value is not a base-10 integer
                within the signed 64-bit range.
        """
        return self._parsed(key, ParamKind.INTEGER, parse_i64)

    def param_i64_required(self, key: str) -> int:
        return self._require(key, self.param_i64(key))

    # Unsigned integer

    def param_u64(self, key: str) -> int | None:
        """Read an optional unsigned 64-bit integer parameter.

        Raises:
            InvalidParameterError: If the value is signed, non-numeric, or
                above the unsigned 64-bit range.
        """
        return self._parsed(key, ParamKind.UNSIGNED_INTEGER, parse_u64)

    def param_u64_required(self, key: str) -> int:
        return self._require(key, self.param_u64(key))


def _load_settings() -> ResolverSettings:
    try:
        return ResolverSettings.from_env()
    except ValidationError as e:
        logger.warning(
            "Ignoring invalid BUILD_PARAMS_* logging settings, using defaults: %s", e
        )
        return ResolverSettings.model_construct()


_default_resolver: ParamResolver | None = None


def get_resolver() -> ParamResolver:
    """Return the process-wide resolver over ``os.environ``.

    Parameter values are re-read on every call, but the resolver's logging
    settings (``BUILD_PARAMS_LOG_LOOKUPS``, ``BUILD_PARAMS_REDACT_SENSITIVE``)
    are read once, when the first call builds it. Later changes to those
    variables are not seen.
    """
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ParamResolver()
    return _default_resolver


def lookup(key: str) -> str | None:
    return get_resolver().lookup(key)


def param(key: str) -> str | None:
    return get_resolver().param(key)


def param_required(key: str) -> str:
    return get_resolver().param_required(key)


def param_bool(key: str) -> bool | None:
    return get_resolver().param_bool(key)


def param_bool_required(key: str) -> bool:
    return get_resolver().param_bool_required(key)


def param_i64(key: str) -> int | None:
    return get_resolver().param_i64(key)


def param_i64_required(key: str) -> int:
    return get_resolver().param_i64_required(key)


def param_u64(key: str) -> int | None:
    return get_resolver().param_u64(key)


def param_u64_required(key: str) -> int:
    return get_resolver().param_u64_required(key)
