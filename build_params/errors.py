"""Exceptions raised by the build parameter accessors."""

from __future__ import annotations

from build_params.enums import ParamKind
from build_params.keys import env_var_name


class BuildParamError(Exception):
    """Base class for build parameter failures."""

    def __init__(self, key: str, message: str, *, env_var: str | None = None) -> None:
        super().__init__(message)
        self.key = key
        self.env_var = env_var or env_var_name(key)


class MissingParameterError(BuildParamError, LookupError):
    """Raised when a required parameter is not set."""

    def __init__(self, key: str, *, env_var: str | None = None) -> None:
        super().__init__(key, f"build parameter `{key}` is missing", env_var=env_var)


class InvalidParameterError(BuildParamError, ValueError):
    """Raised when a parameter is set but does not parse as the requested kind."""

    def __init__(
        self,
        key: str,
        kind: ParamKind,
        value: str,
        *,
        env_var: str | None = None,
    ) -> None:
        super().__init__(
            key,
            f"build parameter `{key}` is invalid: expected {kind.expected}",
            env_var=env_var,
        )
        self.kind = kind
        self.value = value
