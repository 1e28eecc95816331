"""PEM block scanner.

Scans PEM text in two linear passes and reports each block's type and the
offsets of its content, without copying the content.

Architecture:
scanner/
├── __init__.py          # Re-exports PemBlockScanner, scan_pem
├── core.py              # PemBlockScanner (block state machine)
├── lines.py             # Line segmentation pass
├── markers.py           # BEGIN/END marker grammar
└── states.py            # Idle / InBlock scanner states

Usage:
    >>> from pemblocks.scanner import scan_pem
    >>> pem = "-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n"
    >>> scan_pem(pem)
    (PemBlockInfo('CERTIFICATE', 28:32),)

"""

from pemblocks.scanner.core import PemBlockScanner, scan_pem

__all__ = ["PemBlockScanner", "scan_pem"]
