"""Two-pass PEM block scanner.

Pass 1 segments the buffer into line offsets. Pass 2 runs the Idle/InBlock
state machine over those offsets and emits one PemBlockInfo per
BEGIN/END pair. Both passes are linear in the length of the buffer.

Block content is never copied: content lines are only inspected in place
and blocks record offsets. Marker lines are the only lines turned into
strings, and they cannot contain Base64 data.

Thread Safety:
Scanner instances hold only instance-local, read-only state.
No shared mutable state.

"""

from __future__ import annotations

from pemblocks.blocks import ContentRange, PemBlockInfo
from pemblocks.config import ScanConfig, get_scan_config
from pemblocks.errors import PemFormatError, PemFormatReason
from pemblocks.scanner.lines import is_blank, split_lines
from pemblocks.scanner.markers import MARKER_CHAR, decode_block_begin, decode_block_end
from pemblocks.scanner.states import IDLE, Idle, InBlock, ScannerState


class PemBlockScanner:
    """Scanner for the blocks of a PEM document.

    Usage:
            >>> scanner = PemBlockScanner(contents)
            >>> for block in scanner.scan():
            ...     print(block)
        PemBlockInfo('CERTIFICATE', 28:156)

    Raises PemFormatError from scan() on the first structural problem;
    there is no partial result.

    """

    __slots__ = (
        "_buffer",
        "_config",
    )

    def __init__(self, buffer: str, config: ScanConfig | None = None) -> None:
        """Initialize scanner with a PEM buffer.

        Args:
            buffer: Complete PEM document as text
            config: Scan options; the context's config (see
                pemblocks.config) when omitted
        """
        self._buffer = buffer
        self._config = config if config is not None else get_scan_config()

    @property
    def config(self) -> ScanConfig:
        return self._config

    def scan(self) -> tuple[PemBlockInfo, ...]:
        """Scan the buffer.

        Returns:
            The blocks in order of appearance (never empty)

        Raises:
            PemFormatError: If the buffer is not a well-formed PEM document

        Complexity: O(n) where n = len(buffer)
        """
        buffer = self._buffer
        lines = split_lines(buffer, keep_unterminated=self._config.keep_unterminated_line)

        blocks: list[PemBlockInfo] = []
        state: ScannerState = IDLE

        for lineno, (start, end) in enumerate(lines, start=1):
            if is_blank(buffer, start, end):
                continue

            if buffer[start] == MARKER_CHAR:
                state = self._on_marker_line(state, start, end, lineno, blocks)
            else:
                state = self._on_content_line(state, start, end, lineno)

        if isinstance(state, InBlock) and self._config.strict:
            raise PemFormatError(PemFormatReason.EXPECTED_BLOCK_END, state.begin_lineno)

        if not blocks:
            raise PemFormatError(PemFormatReason.NO_CONTENT)

        return tuple(blocks)

    def _on_marker_line(
        self,
        state: ScannerState,
        start: int,
        end: int,
        lineno: int,
        blocks: list[PemBlockInfo],
    ) -> ScannerState:
        buffer = self._buffer
        match state:
            case Idle():
                block_type = decode_block_begin(buffer, start, end)
                if block_type is None:
                    raise PemFormatError(PemFormatReason.EXPECTED_BLOCK_BEGIN, lineno)
                return InBlock(block_type=block_type, begin_lineno=lineno)

            case InBlock():
                block_type = decode_block_end(buffer, start, end)
                if block_type is None:
                    raise PemFormatError(PemFormatReason.EXPECTED_BLOCK_END, lineno)
                if block_type != state.block_type:
                    raise PemFormatError(PemFormatReason.MISMATCHED_BLOCK_TYPE, lineno)
                if not state.has_content:
                    raise PemFormatError(PemFormatReason.EMPTY_BLOCK, lineno)

                blocks.append(
                    PemBlockInfo(
                        block_type=block_type,
                        content_range=ContentRange(state.content_start, state.content_end),
                    )
                )
                return IDLE

        raise AssertionError(f"unknown scanner state: {state!r}")

    def _on_content_line(
        self, state: ScannerState, start: int, end: int, lineno: int
    ) -> ScannerState:
        if isinstance(state, Idle):
            raise PemFormatError(PemFormatReason.MISSING_BLOCK_BEGIN, lineno)
        return state.with_content_line(start, end)


def scan_pem(buffer: str, *, config: ScanConfig | None = None) -> tuple[PemBlockInfo, ...]:
    """Scan a PEM document into its blocks.

    Args:
        buffer: Complete PEM document as text
        config: Scan options; the context's config when omitted

    Returns:
        The blocks in order of appearance (never empty)

    Raises:
        PemFormatError: If the buffer is not a well-formed PEM document

    Example:
        >>> pem = "-----BEGIN CERTIFICATE-----\\nMIIB\\n-----END CERTIFICATE-----\\n"
        >>> [block.block_type for block in scan_pem(pem)]
        ['CERTIFICATE']
    """
    return PemBlockScanner(buffer, config).scan()
