"""Logical key -> environment variable name normalization.

The build orchestrator exports each declared parameter as
``BUILD_PARAM_<KEY>``, where ``<KEY>`` is the parameter name uppercased with
hyphens replaced by underscores. Keys that differ only by case or by the
choice of ``-``/``_`` therefore name the same variable.
"""

from __future__ import annotations

from typing import Final

PARAM_ENV_PREFIX: Final[str] = "BUILD_PARAM_"


def normalize_key(key: str) -> str:
    """Uppercase ``key`` and replace hyphens with underscores."""
    return key.upper().replace("-", "_")


def env_var_name(key: str, prefix: str = PARAM_ENV_PREFIX) -> str:
    """Return the environment variable name that carries ``key``.

    Examples:
        >>> env_var_name("enable-simd")
        'BUILD_PARAM_ENABLE_SIMD'
        >>> env_var_name("ENABLE_simd")
        'BUILD_PARAM_ENABLE_SIMD'
    """
    return f"{prefix}{normalize_key(key)}"
