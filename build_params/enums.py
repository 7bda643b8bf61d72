"""StrEnum definitions for type-safe constants."""

from enum import StrEnum


class ParamKind(StrEnum):
    """Typed representations a raw parameter string can fail to parse as."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    UNSIGNED_INTEGER = "unsigned_integer"

    @property
    def expected(self) -> str:
        """Human-readable description used in invalid-parameter messages."""
        return _EXPECTED[self]


_EXPECTED = {
    ParamKind.BOOLEAN: "boolean (true, false, 1, or 0)",
    ParamKind.INTEGER: "integer",
    ParamKind.UNSIGNED_INTEGER: "unsigned integer",
}
