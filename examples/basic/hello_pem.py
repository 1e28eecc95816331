"""Scan a PEM document in 3 lines: zero config, zero deps."""

from pemblocks import scan_pem

pem = "-----BEGIN CERTIFICATE-----\nMIIBszCCAVmgAwIBAgIU\n-----END CERTIFICATE-----\n"
for block in scan_pem(pem):
    print(block.block_type, block.content_range)
