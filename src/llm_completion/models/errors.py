from __future__ import annotations

from typing import Any

MISSING: Any = object()


class ShapeMismatchError(TypeError):
    """A decoded JSON value is absent or has the wrong type.

    `field` is a path into the payload, e.g. `choices[1].text`. An empty
    path means the value being decoded was not an object at all.
    """

    def __init__(self, field: str, expected: str, actual: Any = MISSING) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        where = field or "<root>"
        if actual is MISSING:
            msg = f"{where}: missing required key (expected {expected})"
        else:
            msg = f"{where}: expected {expected}, got {type(actual).__name__} {actual!r}"
        super().__init__(msg)

    @property
    def missing(self) -> bool:
        return self.actual is MISSING

    def with_prefix(self, prefix: str) -> ShapeMismatchError:
        if not self.field:
            path = prefix
        elif self.field.startswith("["):
            path = f"{prefix}{self.field}"
        else:
            path = f"{prefix}.{self.field}"
        return ShapeMismatchError(path, self.expected, self.actual)
