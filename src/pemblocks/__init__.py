"""
pemblocks: PEM block scanner for Python

Finds the blocks of a PEM document (certificates, keys, CSRs) and reports
each block's type and the offsets of its content. Block content is never
copied by the scanner, so private key material stays in the one buffer
the caller owns. Zero runtime dependencies.

Quick Start:
    >>> from pemblocks import scan_pem
    >>> pem = "-----BEGIN CERTIFICATE-----\\nMIIB\\n-----END CERTIFICATE-----\\n"
    >>> blocks = scan_pem(pem)
    >>> blocks[0].block_type
    'CERTIFICATE'
    >>> blocks[0].content_of(pem)
    'MIIB'

    >>> # Or the file-level view
    >>> from pemblocks import PemFileInfo
    >>> info = PemFileInfo.read("server.pem")
    >>> info.find("PRIVATE KEY")

Installation:
    pip install pemblocks
"""

from pemblocks.blocks import ContentRange, PemBlockInfo
from pemblocks.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from pemblocks.encoding import encode_pem
from pemblocks.errors import PemError, PemFormatError, PemFormatReason
from pemblocks.pemfile import PemFileInfo, is_pem
from pemblocks.scanner import PemBlockScanner, scan_pem

__version__ = "0.1.0"

__all__ = [
    # Scanning
    "PemBlockScanner",
    "scan_pem",
    # Results
    "ContentRange",
    "PemBlockInfo",
    "PemFileInfo",
    "is_pem",
    # Encoding
    "encode_pem",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "PemError",
    "PemFormatError",
    "PemFormatReason",
]
