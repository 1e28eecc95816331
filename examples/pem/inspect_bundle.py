"""Inspect a key + certificate bundle without copying the key.

Shows the file-level view: list blocks by type, pull out only the
certificates, and refuse PKCS#1 private keys with a clear message.

Run::

    python examples/pem/inspect_bundle.py

"""

from pemblocks import PemFileInfo, PemFormatError, encode_pem

# Simulated bundle (normally read with PemFileInfo.read("bundle.pem"))
bundle = "\n".join(
    [
        encode_pem(b"\x30\x82\x04\xbd" + b"\x00" * 60, "PRIVATE KEY", newline="\n"),
        encode_pem(b"\x30\x82\x03\x6b" + b"\x01" * 90, "CERTIFICATE", newline="\n"),
        encode_pem(b"\x30\x82\x03\x6f" + b"\x02" * 90, "CERTIFICATE", newline="\n"),
    ]
) + "\n"

info = PemFileInfo(bundle)

print("=== Blocks ===")
for block in info:
    print(f"{block.block_type:<12} chars {len(block.content_range)}")
print()

print("=== Certificates ===")
for cert in info.blocks_of_type("CERTIFICATE"):
    print(cert.content_of(info.contents).splitlines()[0][:32] + "...")
print()

legacy = PemFileInfo(encode_pem(b"\x30\x82\x04\xa4" + b"\x00" * 40, "RSA PRIVATE KEY") + "\r\n")
if legacy.is_pkcs1_private_key:
    print("PKCS#1 key detected: convert with `openssl pkcs8 -topk8` first")
print()

print("=== Malformed input ===")
try:
    PemFileInfo("-----BEGIN CERTIFICATE-----\n-----END CERTIFICATE-----\n")
except PemFormatError as e:
    print(f"{e} (reason={e.reason.name}, line {e.lineno})")
