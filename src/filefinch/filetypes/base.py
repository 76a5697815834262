# topmark:header:start
#
#   project      : FileFinch
#   file         : base.py
#   file_relpath : src/filefinch/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Building blocks shared by all detection rules.

Defines:
    * `ByteWindow`: an immutable snapshot of the leading (and trailing) bytes of a
      source. Rules only ever see a window, never the source itself.
    * `WindowMatcher`: the protocol every sniffer predicate implements.
    * `DetectionRule`: associates a `FileType` with a matcher and declares how many
      bytes from the front/back of the source the matcher needs.

A rule whose window requirements are not met (input too short) simply does not
match; rules never raise for unrecognized or truncated content.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from filefinch.config.logging import FinchLogger, get_logger

if TYPE_CHECKING:
    from filefinch.filetypes.types import FileType

logger: FinchLogger = get_logger(__name__)


@dataclass(frozen=True)
class ByteWindow:
    """Bounded, immutable view of a source's leading and trailing bytes.

    For inputs smaller than the configured windows, ``head`` and ``tail`` overlap
    (both may hold the whole content).

    Attributes:
        head (bytes): Up to *N* bytes read from offset 0.
        tail (bytes): Up to *M* bytes ending at the end of the source.
        size (int | None): Total size of the source in bytes, when known.
    """

    head: bytes
    tail: bytes = b""
    size: int | None = None

    @classmethod
    def from_bytes(cls, data: bytes, *, head_limit: int, tail_limit: int) -> ByteWindow:
        """Build a window over an in-memory buffer.

        Args:
            data (bytes): The complete content.
            head_limit (int): Maximum number of leading bytes to keep.
            tail_limit (int): Maximum number of trailing bytes to keep.

        Returns:
            ByteWindow: The snapshot.
        """
        data = bytes(data)
        tail: bytes = data[-tail_limit:] if tail_limit > 0 and data else b""
        return cls(head=data[:head_limit], tail=tail, size=len(data))

    @property
    def available(self) -> int:
        """Best known lower bound on the source size."""
        if self.size is not None:
            return self.size
        return max(len(self.head), len(self.tail))

    @property
    def is_complete(self) -> bool:
        """True when ``head`` holds the entire source."""
        return self.size is not None and len(self.head) >= self.size

    def startswith(self, signature: bytes, offset: int = 0) -> bool:
        """Return True if ``signature`` sits at ``offset`` in the head window."""
        end: int = offset + len(signature)
        return end <= len(self.head) and self.head[offset:end] == signature

    def endswith(self, signature: bytes) -> bool:
        """Return True if the source ends with ``signature``."""
        return len(self.tail) >= len(signature) and self.tail.endswith(signature)

    def u32_be(self, offset: int) -> int | None:
        """Read a big-endian unsigned 32-bit integer from the head, or None if short."""
        if offset + 4 > len(self.head):
            return None
        return struct.unpack_from(">I", self.head, offset)[0]

    def i32_le(self, offset: int) -> int | None:
        """Read a little-endian signed 32-bit integer from the head, or None if short."""
        if offset + 4 > len(self.head):
            return None
        return struct.unpack_from("<i", self.head, offset)[0]


@runtime_checkable
class WindowMatcher(Protocol):
    """Protocol for byte-window sniffers.

    A matcher inspects a `ByteWindow` and returns True if it carries the
    signature of its format. Matchers must be pure and fast; they may assume
    nothing about bytes outside the window.
    """

    def __call__(self, window: ByteWindow) -> bool:
        """Check whether ``window`` matches the expected format.

        Args:
            window (ByteWindow): The bytes to inspect.

        Returns:
            bool: True if the window matches, False otherwise.
        """
        ...


@dataclass(frozen=True)
class DetectionRule:
    """A registry entry: *this matcher* identifies *that file type*.

    Attributes:
        name (str): Stable rule identifier (e.g. ``"xlsx"``); reported by `sniff`.
        file_type (FileType): Verdict produced when the matcher succeeds.
        description (str): Human-readable summary of the signature.
        matcher (WindowMatcher): Predicate evaluated against the window.
        head_bytes (int): Leading bytes the matcher needs to see.
        tail_bytes (int): Trailing bytes the matcher needs to see (0 for prefix-only rules).
        min_size (int): Smallest input the rule can possibly match; shorter inputs are
            rejected without calling the matcher.
    """

    name: str
    file_type: FileType
    description: str
    matcher: WindowMatcher = field(compare=False)
    head_bytes: int = 0
    tail_bytes: int = 0
    min_size: int = 1

    def matches(self, window: ByteWindow) -> bool:
        """Evaluate the rule against ``window``.

        Any exception raised by the matcher is treated as a non-match: a
        sniffer bug must never turn unrecognized content into an error.

        Args:
            window (ByteWindow): The bytes to inspect.

        Returns:
            bool: True if the rule matches.
        """
        if window.available < self.min_size:
            return False
        try:
            return bool(self.matcher(window))
        except Exception as exc:
            logger.debug("Rule %s raised %r; treating as non-match", self.name, exc)
            return False
