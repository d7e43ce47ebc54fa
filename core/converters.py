"""Per-field value converters used while decoding catalog records.

Both converters are pure functions. The optional `path` argument is only used
to give raised errors their location in the catalog tree.
"""

from __future__ import annotations

import math

from core.errors import PathPart, TypeMismatchError, ValueOverflowError
from core.models import FORMAT_EPOCH_OFFSET, NANOS_PER_SECOND, Timestamp

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def time_interval_to_timestamp(value: object, path: tuple[PathPart, ...] = ()) -> Timestamp:
    """Convert seconds since 2001-01-01 UTC into an absolute `Timestamp`.

    The fractional part is truncated (not rounded) to whole nanoseconds.
    Negative intervals floor toward negative infinity so the nanosecond
    component is never negative.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatchError("real number", value, path)
    if isinstance(value, float):
        if math.isnan(value):
            raise TypeMismatchError("finite real number", value, path)
        if math.isinf(value):
            raise ValueOverflowError(value, "timestamp", path)

    whole = math.floor(value)
    nanoseconds = int(NANOS_PER_SECOND * (value - whole))
    # float error can push the fraction up to exactly one second
    if nanoseconds >= NANOS_PER_SECOND:
        whole += 1
        nanoseconds -= NANOS_PER_SECOND

    seconds = whole + FORMAT_EPOCH_OFFSET
    if not _I64_MIN <= seconds <= _I64_MAX:
        raise ValueOverflowError(value, "timestamp", path)
    return Timestamp(seconds=seconds, nanoseconds=nanoseconds)


def filter_album_name(value: object, path: tuple[PathPart, ...] = ()) -> str:
    """Make an album name safe to use as a single path component.

    Trims surrounding whitespace and deletes every "/" outright.
    """
    if not isinstance(value, str):
        raise TypeMismatchError("text", value, path)
    # strip again: deleting "/" can expose whitespace at the edges ("a /")
    return value.strip().replace("/", "").strip()
