"""Part range arithmetic."""

from __future__ import annotations

from collections.abc import Iterator

from ...core.exceptions import BadServerResponseError
from .definitions import Continuation, TransferRange


def initial_range(part_size: int, total_size: int) -> TransferRange:
    return TransferRange(0, min(part_size, total_size))


def next_range(previous: TransferRange, part_size: int, total_size: int) -> TransferRange | None:
    """Range following ``previous``, or None once ``total_size`` is reached."""
    if previous.upper_bound >= total_size:
        return None
    lower = previous.upper_bound
    return TransferRange(lower, min(lower + part_size, total_size))


def iter_ranges(part_size: int, total_size: int) -> Iterator[TransferRange]:
    """All locally computed ranges of an upload, in order."""
    current: TransferRange | None = initial_range(part_size, total_size)
    while current is not None:
        yield current
        current = next_range(current, part_size, total_size)


def resolve_continuation(
    continuation: Continuation,
    part_size: int,
    total_size: int,
    *,
    url: str | None = None,
) -> TransferRange:
    """Turn a server continuation into the next range to send.

    An explicit upper bound is used verbatim; an open-ended continuation
    covers at most one part.

    Raises:
        BadServerResponseError: If the continuation lies outside the payload
    """
    lower = continuation.lower_bound
    upper = continuation.upper_bound
    if upper is None:
        upper = min(lower + part_size, total_size)
    if not 0 <= lower < upper <= total_size:
        raise BadServerResponseError(
            f"continuation [{lower}, {upper}) outside payload of {total_size} bytes", url=url
        )
    return TransferRange(lower, upper)


def parse_byte_range(value: str) -> Continuation:
    """Parse an inclusive ``"first-last"`` or open ``"first-"`` range string.

    Accepts an optional ``bytes=`` prefix, as used by ``Range`` headers.

    Raises:
        BadServerResponseError: If the value is not a byte range
    """
    text = value.strip()
    if text.startswith("bytes="):
        text = text[len("bytes=") :]
    first, sep, last = text.partition("-")
    try:
        lower = int(first)
        upper = int(last) + 1 if last else None
    except ValueError as exc:
        raise BadServerResponseError(f"malformed byte range {value!r}") from exc
    if not sep or lower < 0:
        raise BadServerResponseError(f"malformed byte range {value!r}")
    return Continuation(lower, upper)
