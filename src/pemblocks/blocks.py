"""Block descriptors produced by the PEM scanner.

A PemBlockInfo records the type label of a block and where its content
lives in the scanned buffer. It never stores the content itself: blocks
may hold private keys, and the offsets let the caller decide if and when
the key material is copied.

Thread Safety:
ContentRange and PemBlockInfo are frozen (immutable) and safe to share
across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ContentRange:
    """Half-open character range into the scanned buffer.

    ``buffer[start:end]`` is the content of the block: every line from the
    first content line to the last one, with their original line
    terminators in between. The range never includes the line terminator
    that follows the last content line.

    Attributes:
        start: Offset of the first character of the first content line
        end: Offset one past the last character of the last content line

    Examples:
            >>> rng = ContentRange(28, 92)
            >>> len(rng)
            64
    """

    start: int
    end: int

    def __len__(self) -> int:
        """Length of the range without allocation."""
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def extract(self, buffer: str) -> str:
        """Extract the range from buffer (creates new string)."""
        return buffer[self.start : self.end]


@dataclass(frozen=True, slots=True)
class PemBlockInfo:
    """One BEGIN/END-delimited block of a PEM document.

    Attributes:
        block_type: Text between "-----BEGIN " and "-----", for example
            "CERTIFICATE", "PUBLIC KEY" or "RSA PRIVATE KEY"
        content_range: Where the block's content lines live in the buffer
            that was scanned. Excludes the BEGIN and END lines.

    """

    block_type: str
    content_range: ContentRange

    def content_of(self, buffer: str) -> str:
        """Extract this block's content from the scanned buffer.

        The returned string is a copy of the (possibly secret) content.
        Only call this with the buffer the block was scanned from.
        """
        return self.content_range.extract(buffer)

    def __repr__(self) -> str:
        rng = self.content_range
        return f"PemBlockInfo({self.block_type!r}, {rng.start}:{rng.end})"
