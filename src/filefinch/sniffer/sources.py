# topmark:header:start
#
#   project      : FileFinch
#   file         : sources.py
#   file_relpath : src/filefinch/sniffer/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte sources: bounded front/back reads over bytes, paths and file objects.

The engine never buffers a whole file. Every source exposes the same three
operations:

- ``read_head(limit)``: at most ``limit`` bytes from offset 0;
- ``read_tail(limit)``: at most ``limit`` bytes ending at the end of the source;
- ``size()``: total size when known, else None.

Callers can pass their own object implementing `ByteSource` (e.g. a ranged
HTTP reader or a test stub standing in for a huge file).

`open_source` adapts the supported inputs and guarantees that anything it
opens is closed again, including when a read fails. File objects supplied by
the caller are left open and, when seekable, repositioned where they were.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Protocol, runtime_checkable

from filefinch.config.logging import FinchLogger, get_logger
from filefinch.constants import STREAM_CHUNK_SIZE
from filefinch.filetypes.base import ByteWindow

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: FinchLogger = get_logger(__name__)


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for sources that support bounded reads from both ends."""

    def read_head(self, limit: int) -> bytes:
        """Return at most ``limit`` bytes from the start of the source."""
        ...

    def read_tail(self, limit: int) -> bytes:
        """Return at most ``limit`` bytes from the end of the source."""
        ...

    def size(self) -> int | None:
        """Return the total size in bytes, or None if unknown."""
        ...


class BytesSource:
    """In-memory source."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data).cast("B")

    def read_head(self, limit: int) -> bytes:
        return bytes(self._data[:limit])

    def read_tail(self, limit: int) -> bytes:
        if limit <= 0:
            return b""
        return bytes(self._data[-limit:])

    def size(self) -> int | None:
        return len(self._data)


def _read_upto(fh: IO[bytes], limit: int) -> bytes:
    """Read until ``limit`` bytes or EOF (raw streams may return short reads)."""
    buf = bytearray()
    while len(buf) < limit:
        chunk = fh.read(limit - len(buf))
        if not chunk:
            break
        if isinstance(chunk, str):
            raise TypeError("file object must be opened in binary mode")
        buf += chunk
    return bytes(buf)


class FileObjectSource:
    """Seekable binary file object."""

    def __init__(self, fh: IO[bytes]) -> None:
        self._fh = fh
        self._size: int = fh.seek(0, os.SEEK_END)

    def read_head(self, limit: int) -> bytes:
        self._fh.seek(0)
        return _read_upto(self._fh, limit)

    def read_tail(self, limit: int) -> bytes:
        if limit <= 0:
            return b""
        self._fh.seek(max(0, self._size - limit))
        return _read_upto(self._fh, limit)

    def size(self) -> int | None:
        return self._size


class StreamSource:
    """Non-seekable binary stream (pipe, socket, stdin).

    ``read_head`` must be called first. ``read_tail`` then skims the rest of the
    stream in fixed-size chunks, keeping only the last ``limit`` bytes.
    """

    def __init__(self, fh: IO[bytes], chunk_size: int = STREAM_CHUNK_SIZE) -> None:
        self._fh = fh
        self._chunk_size: int = chunk_size
        self._head: bytes | None = None
        self._size: int | None = None

    def read_head(self, limit: int) -> bytes:
        if self._head is None:
            self._head = _read_upto(self._fh, limit)
            if len(self._head) < limit:
                self._size = len(self._head)
        return self._head[:limit]

    def read_tail(self, limit: int) -> bytes:
        if self._head is None:
            raise RuntimeError("read_head() must be called before read_tail()")
        window = bytearray(self._head[-limit:] if limit > 0 else b"")
        total: int = len(self._head)
        if self._size is None:
            while True:
                chunk = self._fh.read(self._chunk_size)
                if not chunk:
                    break
                total += len(chunk)
                window += chunk
                if len(window) > limit:
                    del window[: len(window) - limit]
            self._size = total
        if limit <= 0:
            return b""
        return bytes(window[-limit:])

    def size(self) -> int | None:
        return self._size


def describe_source(obj: object) -> str:
    """Return a short human-readable name for ``obj`` (for logs and errors)."""
    if isinstance(obj, (str, os.PathLike)):
        return os.fspath(obj)  # type: ignore[arg-type]
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return f"<{len(memoryview(obj).cast('B'))} bytes>"
    name: object = getattr(obj, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(obj).__name__}>"


@contextmanager
def open_source(obj: object) -> Iterator[ByteSource]:
    """Adapt ``obj`` to a `ByteSource` for the duration of the ``with`` block.

    Supported inputs:
        * ``bytes``, ``bytearray``, ``memoryview``;
        * ``str`` or ``os.PathLike`` paths (opened here, closed on exit);
        * binary file objects (left open; seekable ones are repositioned);
        * any `ByteSource`.

    Args:
        obj (object): The input to adapt.

    Yields:
        ByteSource: A bounded-read view of ``obj``.

    Raises:
        TypeError: If ``obj`` is none of the supported inputs.
        OSError: If the source cannot be opened or read.
    """
    if isinstance(obj, (bytes, bytearray, memoryview)):
        yield BytesSource(obj)
        return

    if isinstance(obj, (str, os.PathLike)):
        with open(obj, "rb") as fh:  # noqa: PTH123
            yield FileObjectSource(fh)
        return

    if isinstance(obj, ByteSource):
        yield obj
        return

    if callable(getattr(obj, "read", None)):
        fh: IO[bytes] = obj  # type: ignore[assignment]
        if getattr(fh, "closed", False):
            raise OSError(f"{describe_source(obj)} is closed")
        seekable = getattr(fh, "seekable", None)
        if callable(seekable) and seekable():
            position: int = fh.tell()
            try:
                yield FileObjectSource(fh)
            finally:
                fh.seek(position)
        else:
            yield StreamSource(fh)
        return

    raise TypeError(f"Unsupported byte source: {type(obj).__name__}")


def read_window(source: ByteSource, head_limit: int, tail_limit: int) -> ByteWindow:
    """Snapshot the leading and trailing bytes of ``source``.

    Args:
        source (ByteSource): The source to read.
        head_limit (int): Maximum leading bytes.
        tail_limit (int): Maximum trailing bytes.

    Returns:
        ByteWindow: The snapshot; holds no reference to ``source``.
    """
    head: bytes = source.read_head(head_limit)
    size: int | None = source.size()
    if size is not None and len(head) >= size:
        # The head already holds everything; skip the second read.
        tail: bytes = head[-tail_limit:] if tail_limit > 0 and head else b""
    else:
        tail = source.read_tail(tail_limit)
        size = source.size()
    logger.trace(
        "Read window: head=%d tail=%d size=%s", len(head), len(tail), size
    )
    return ByteWindow(head=head, tail=tail, size=size)
