"""Exception classes for pemblocks.

Provides standardized exceptions for error handling throughout pemblocks.
Every structural problem in a PEM document is reported as a single
exception type, PemFormatError, discriminated by a PemFormatReason.
"""

from __future__ import annotations

from enum import Enum


class PemError(Exception):
    """Base exception for all pemblocks errors.

    Subclass this for specific error categories.
    """

    pass


class PemFormatReason(Enum):
    """Why a PEM document was rejected.

    The value of each member is the fixed, user-facing message.
    """

    EXPECTED_BLOCK_BEGIN = "Malformed PEM file (expected block begin)."
    EXPECTED_BLOCK_END = "Malformed PEM file (expected block end)."
    MISMATCHED_BLOCK_TYPE = "Malformed PEM file (block types don't match)."
    EMPTY_BLOCK = "Malformed PEM file (no block contents)."
    MISSING_BLOCK_BEGIN = "Malformed PEM file (missing block begin)."
    NO_CONTENT = "Malformed PEM file (no content)."

    @property
    def message(self) -> str:
        return self.value


class PemFormatError(PemError):
    """Malformed PEM document.

    Raised by the scanner when the input violates the block structure.
    The message is fixed per reason and never includes text from the
    input, since that text may be key material.
    """

    def __init__(self, reason: PemFormatReason, lineno: int | None = None) -> None:
        """Initialize format error.

        Args:
            reason: Which structural rule was violated
            lineno: Line of the offending line (1-indexed), if there is one.
                Kept as an attribute only; it is not part of the message.
        """
        self.reason = reason
        self.lineno = lineno
        super().__init__(reason.message)

    @property
    def message(self) -> str:
        return self.reason.message

    def __reduce__(self) -> tuple[type[PemFormatError], tuple[PemFormatReason, int | None]]:
        # args only holds the message; rebuild from reason and lineno
        return (type(self), (self.reason, self.lineno))

    def __repr__(self) -> str:
        return f"PemFormatError({self.reason.name}, lineno={self.lineno})"
