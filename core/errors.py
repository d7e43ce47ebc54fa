"""Exception hierarchy for decoding a library catalog into typed records."""

from __future__ import annotations

from collections.abc import Iterable

PathPart = str | int


def format_path(path: Iterable[PathPart]) -> str:
    """Render a decode path like ``List of Albums[0].AlbumId``."""
    out = ""
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        elif out:
            out += f".{part}"
        else:
            out = part
    return out or "<root>"


class DecodeError(Exception):
    """Base exception for catalog decode failures.

    Attributes:
        message: Short description of what went wrong.
        path: Keys/indices from the catalog root to the failing value.
        record: Name of the record type being decoded, if known.
    """

    def __init__(
        self,
        message: str,
        path: Iterable[PathPart] = (),
        record: str | None = None,
    ) -> None:
        self.message = message
        self.path: tuple[PathPart, ...] = tuple(path)
        self.record = record
        super().__init__(self._render())

    @property
    def location(self) -> str:
        return format_path(self.path)

    def _render(self) -> str:
        text = f"{self.message} at {self.location}"
        if self.record:
            text += f" ({self.record})"
        return text


class MissingFieldError(DecodeError):
    """Raised when a required key is absent from a dictionary node."""

    def __init__(
        self, field: str, path: Iterable[PathPart] = (), record: str | None = None
    ) -> None:
        self.field = field
        super().__init__(f"missing field {field!r}", path, record)


class TypeMismatchError(DecodeError):
    """Raised when a value does not have the expected shape."""

    def __init__(
        self,
        expected: str,
        value: object,
        path: Iterable[PathPart] = (),
        record: str | None = None,
    ) -> None:
        self.expected = expected
        self.actual = type(value).__name__
        super().__init__(f"expected {expected}, got {self.actual}", path, record)


class ValueOverflowError(DecodeError):
    """Raised when a numeric value exceeds the range of its target type."""

    def __init__(
        self,
        value: object,
        target: str,
        path: Iterable[PathPart] = (),
        record: str | None = None,
    ) -> None:
        self.value = value
        self.target = target
        super().__init__(f"value {value!r} out of range for {target}", path, record)


class LibraryLoadError(Exception):
    """Raised when a catalog file cannot be located, read or parsed."""
