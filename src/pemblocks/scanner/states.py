"""Scanner states.

The block assembler is a two-state machine:
- Idle: between blocks, expecting a BEGIN line
- InBlock: after a BEGIN line, collecting content until the END line

"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Idle:
    """Between blocks."""


@dataclass(frozen=True, slots=True)
class InBlock:
    """Inside a block.

    Attributes:
        block_type: Type from the BEGIN line
        begin_lineno: Line number of the BEGIN line (1-indexed)
        content_start: Start offset of the first content line, if any
        content_end: End offset of the most recent content line, if any
    """

    block_type: str
    begin_lineno: int
    content_start: int | None = None
    content_end: int | None = None

    def with_content_line(self, start: int, end: int) -> InBlock:
        """Record a content line; the first one fixes content_start."""
        if self.content_start is None:
            return replace(self, content_start=start, content_end=end)
        return replace(self, content_end=end)

    @property
    def has_content(self) -> bool:
        return self.content_start is not None and self.content_end is not None


ScannerState = Idle | InBlock

IDLE = Idle()
