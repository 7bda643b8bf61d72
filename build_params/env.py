"""Read-only access to the process environment.

Every parameter lookup goes through an ``EnvSource`` instead of touching
``os.environ`` directly, so tests can hand the resolver a plain dict and
never mutate real process state.

Note: This is intentionally small and synchronous. Nothing here writes to
the environment and nothing is cached; each ``get`` reads the live value.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping

EnvLookup = Callable[[str], str | None]


class EnvSource:
    """Wrapper around a key -> value lookup function."""

    def __init__(self, lookup: EnvLookup | None = None) -> None:
        self._lookup = lookup

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or ``None`` if unset or not valid Unicode.

        ``os.environ`` surrogate-escapes undecodable bytes; such values are
        reported as absent rather than handed out with lone surrogates.
        """
        if self._lookup is None:
            # Resolve os.environ per call so monkeypatched environments are seen.
            value = os.environ.get(name)
        else:
            value = self._lookup(name)
        if value is None:
            return None
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return None
        return value

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "EnvSource":
        """Build a source over a fixed mapping (a fake environment)."""
        return cls(values.get)


def as_env_source(env: EnvSource | Mapping[str, str] | EnvLookup | None) -> EnvSource:
    """Coerce the accepted environment forms into an ``EnvSource``.

    Args:
        env: ``None`` for the live process environment, an ``EnvSource``,
            a mapping, or a callable returning the value or ``None``.
    """
    if env is None:
        return EnvSource()
    if isinstance(env, EnvSource):
        return env
    if isinstance(env, Mapping):
        return EnvSource.from_mapping(env)
    if callable(env):
        return EnvSource(env)
    raise TypeError(f"Unsupported environment source: {type(env).__name__}")
