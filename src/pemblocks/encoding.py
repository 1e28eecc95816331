"""PEM encoding.

Wraps raw (typically DER) bytes into a PEM block. Only the encoding
direction lives here; turning block content back into bytes is up to the
consumer.
"""

from __future__ import annotations

import base64

from pemblocks.scanner.markers import BEGIN_PREFIX, END_PREFIX, MARKER_SUFFIX

DEFAULT_LINE_LENGTH = 64


def encode_pem(
    data: bytes,
    block_type: str,
    *,
    line_length: int = DEFAULT_LINE_LENGTH,
    newline: str = "\r\n",
) -> str:
    """Encode bytes as a single PEM block.

    The output has no newline after the END line.

    Args:
        data: Bytes to encode (must not be empty)
        block_type: Label for the BEGIN/END lines, e.g. "CERTIFICATE"
        line_length: Base64 characters per content line
        newline: Line separator

    Returns:
        The PEM text

    Raises:
        ValueError: On empty data, an empty or multi-line block type, a
            non-positive line length, or a newline other than "\\n"/"\\r\\n"

    Example:
        >>> encode_pem(b"hello", "GREETING", newline="\\n")
        '-----BEGIN GREETING-----\\naGVsbG8=\\n-----END GREETING-----'
    """
    if not data:
        raise ValueError("Cannot encode empty data as PEM block")
    if not block_type:
        raise ValueError("Block type cannot be empty")
    if "\n" in block_type or "\r" in block_type:
        raise ValueError(f"Block type must be a single line: {block_type!r}")
    if line_length <= 0:
        raise ValueError(f"Line length must be positive, got {line_length}")
    if newline not in ("\n", "\r\n"):
        raise ValueError(f"Unsupported newline: {newline!r}")

    encoded = base64.b64encode(data).decode("ascii")

    lines = [f"{BEGIN_PREFIX}{block_type}{MARKER_SUFFIX}"]
    lines.extend(encoded[i : i + line_length] for i in range(0, len(encoded), line_length))
    lines.append(f"{END_PREFIX}{block_type}{MARKER_SUFFIX}")

    return newline.join(lines)
