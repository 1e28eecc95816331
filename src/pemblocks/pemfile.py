"""File-level view of a PEM document.

PemFileInfo scans a PEM document once and gives certificate loaders the
lookups they need: blocks by type, and whether a private key file is in
the legacy PKCS#1 format.

Usage:
    >>> info = PemFileInfo.read("server.pem")
    >>> cert = info.find("CERTIFICATE")
    >>> der_b64 = cert.content_of(info.contents)

"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from pemblocks.blocks import PemBlockInfo
from pemblocks.config import ScanConfig
from pemblocks.scanner import PemBlockScanner
from pemblocks.scanner.markers import BEGIN_PREFIX
from pemblocks.utils.logger import get_logger

logger = get_logger(__name__)

PKCS1_PRIVATE_KEY_TYPE = "RSA PRIVATE KEY"


def is_pem(data: bytes | str) -> bool:
    """Fast check if data looks like PEM.

    Only checks that the first non-whitespace text is a BEGIN marker; the
    document is not scanned.
    """
    if isinstance(data, bytes):
        return data.lstrip().startswith(BEGIN_PREFIX.encode("ascii"))
    return data.lstrip().startswith(BEGIN_PREFIX)


class PemFileInfo:
    """The blocks of one PEM document.

    Keeps a reference to the scanned text so block content can be
    extracted on demand; the blocks themselves only hold offsets.

    Raises PemFormatError from the constructor if the document is
    malformed.
    """

    __slots__ = ("_contents", "_blocks")

    def __init__(self, contents: str, *, config: ScanConfig | None = None) -> None:
        self._contents = contents
        self._blocks = PemBlockScanner(contents, config).scan()

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        encoding: str = "ascii",
        *,
        config: ScanConfig | None = None,
    ) -> PemFileInfo:
        """Decode and scan a PEM document.

        Raises:
            UnicodeDecodeError: If data is not valid in the given encoding
            PemFormatError: If the document is malformed
        """
        return cls(data.decode(encoding), config=config)

    @classmethod
    def read(
        cls,
        path: str | Path,
        encoding: str = "ascii",
        *,
        config: ScanConfig | None = None,
    ) -> PemFileInfo:
        """Read and scan a PEM file."""
        path = Path(path)
        info = cls.from_bytes(path.read_bytes(), encoding, config=config)
        logger.debug(
            "Read PEM file %s: %d block(s) [%s]",
            path,
            len(info),
            ", ".join(block.block_type for block in info),
        )
        return info

    @property
    def contents(self) -> str:
        """The scanned text."""
        return self._contents

    @property
    def blocks(self) -> tuple[PemBlockInfo, ...]:
        return self._blocks

    def find(self, block_type: str) -> PemBlockInfo | None:
        """First block of the given type (case-insensitive), or None."""
        wanted = block_type.casefold()
        for block in self._blocks:
            if block.block_type.casefold() == wanted:
                return block
        return None

    def blocks_of_type(self, block_type: str) -> list[PemBlockInfo]:
        """All blocks of the given type (case-insensitive)."""
        wanted = block_type.casefold()
        return [block for block in self._blocks if block.block_type.casefold() == wanted]

    @property
    def is_pkcs1_private_key(self) -> bool:
        """True if this is a single-block PKCS#1 ("RSA PRIVATE KEY") file.

        PKCS#1 keys predate PKCS#8 and many loaders only accept the latter;
        this lets them report the format instead of a generic parse failure.
        """
        return (
            len(self._blocks) == 1
            and self._blocks[0].block_type.casefold() == PKCS1_PRIVATE_KEY_TYPE.casefold()
        )

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[PemBlockInfo]:
        return iter(self._blocks)

    def __getitem__(self, index: int) -> PemBlockInfo:
        return self._blocks[index]

    def __repr__(self) -> str:
        types = ", ".join(block.block_type for block in self._blocks)
        return f"PemFileInfo([{types}])"
