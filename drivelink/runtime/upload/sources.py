"""Byte sources for uploads.

A data provider is any callable from a ``TransferRange`` to exactly the
bytes of that range. The engine does not care whether they come from
memory or disk.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from ...core.exceptions import DataSourceError
from .definitions import TransferRange

DataProvider = Callable[[TransferRange], bytes]


def bytes_source(data: bytes) -> DataProvider:
    view = memoryview(data)

    def read(range_: TransferRange) -> bytes:
        if range_.upper_bound > len(view):
            raise DataSourceError(
                f"range {range_} beyond end of {len(view)}-byte buffer", range=range_
            )
        return bytes(view[range_.lower_bound : range_.upper_bound])

    return read


def file_source(path: str | os.PathLike[str]) -> DataProvider:
    """Read ranges from a local file, reopening it for every part."""
    path = os.fspath(path)

    def read(range_: TransferRange) -> bytes:
        try:
            with open(path, "rb") as handle:
                handle.seek(range_.lower_bound)
                if handle.tell() != range_.lower_bound:
                    raise DataSourceError(
                        f"cannot seek to {range_.lower_bound}", range=range_, path=path
                    )
                data = handle.read(range_.length)
        except OSError as exc:
            raise DataSourceError(f"cannot read {path}: {exc}", range=range_, path=path) from exc
        if len(data) != range_.length:
            raise DataSourceError(
                f"short read: wanted {range_.length} bytes, got {len(data)}",
                range=range_,
                path=path,
            )
        return data

    return read


def file_size(path: str | os.PathLike[str]) -> int:
    return os.stat(path).st_size
