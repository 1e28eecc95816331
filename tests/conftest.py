"""Shared PEM fixtures."""

from __future__ import annotations

import pytest

from pemblocks.config import reset_scan_config

CERT_LINE_1 = "MIIFwTCCA6mgAwIBAgIUWDxRxdUBMGqfq+dtYn8zV2jF5bowDQYJKoZIhvcNAQEL"
CERT_LINE_2 = "BQAwcDELMAkGA1UEBhMCVVMxDzANBgNVBAgMBk9yZWdvbjERMA8GA1UEBwwIUG9y"
CERT_LINE_3 = "X+SSL1oeUHZM2lBcLAdrg/yZ9L8SpOhWdM22O7Vadw4dTOoGWUk4/l2bNFQpvLro"
CERT_LINE_4 = "niBD+MrOEirPPEPhpNo0ElfcVG31dx3mmqujArl0g/at3UngVrUHAgMBAAGjUzBR"

SINGLE_BLOCK = f"""
-----BEGIN CERTIFICATE-----
{CERT_LINE_1}
{CERT_LINE_2}
-----END CERTIFICATE-----
"""

MULTI_BLOCK = f"""
-----BEGIN CERTIFICATE1-----
{CERT_LINE_1}
{CERT_LINE_2}
-----END CERTIFICATE1-----

-----BEGIN CERTIFICATE2-----
{CERT_LINE_3}
{CERT_LINE_4}
-----END CERTIFICATE2-----
"""


@pytest.fixture(autouse=True)
def _reset_config():
    """Every test starts and ends with the default scan config."""
    reset_scan_config()
    yield
    reset_scan_config()


@pytest.fixture
def single_block() -> str:
    return SINGLE_BLOCK


@pytest.fixture
def multi_block() -> str:
    return MULTI_BLOCK
