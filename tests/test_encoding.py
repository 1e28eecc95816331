"""Tests for encode_pem()."""

import base64

import pytest

from pemblocks import encode_pem, scan_pem


class TestEncodePem:
    def test_short_payload(self) -> None:
        assert encode_pem(b"hello", "GREETING") == (
            "-----BEGIN GREETING-----\r\naGVsbG8=\r\n-----END GREETING-----"
        )

    def test_unix_newlines(self) -> None:
        assert encode_pem(b"hello", "GREETING", newline="\n") == (
            "-----BEGIN GREETING-----\naGVsbG8=\n-----END GREETING-----"
        )

    def test_no_trailing_newline(self) -> None:
        assert not encode_pem(b"\x00" * 100, "X").endswith("\n")

    def test_line_wrapping(self) -> None:
        pem = encode_pem(bytes(range(256)), "CERTIFICATE", newline="\n")
        lines = pem.split("\n")

        content = lines[1:-1]
        assert all(len(line) == 64 for line in content[:-1])
        assert 0 < len(content[-1]) <= 64
        assert "".join(content) == base64.b64encode(bytes(range(256))).decode("ascii")

    def test_custom_line_length(self) -> None:
        pem = encode_pem(b"x" * 57, "X", line_length=76, newline="\n")
        # 57 bytes encode to exactly 76 characters
        assert pem.split("\n")[1:-1] == [base64.b64encode(b"x" * 57).decode("ascii")]

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            ({"data": b"", "block_type": "X"}, "empty data"),
            ({"data": b"a", "block_type": ""}, "cannot be empty"),
            ({"data": b"a", "block_type": "A\nB"}, "single line"),
            ({"data": b"a", "block_type": "A\rB"}, "single line"),
            ({"data": b"a", "block_type": "X", "line_length": 0}, "must be positive"),
            ({"data": b"a", "block_type": "X", "newline": "\r"}, "Unsupported newline"),
        ],
    )
    def test_invalid_arguments(self, kwargs: dict, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            encode_pem(**kwargs)


class TestEncodeThenScan:
    @pytest.mark.parametrize("newline", ["\n", "\r\n"])
    def test_scans_back(self, newline: str) -> None:
        data = bytes(range(200))
        pem = encode_pem(data, "RSA PRIVATE KEY", newline=newline) + newline

        blocks = scan_pem(pem)

        assert len(blocks) == 1
        assert blocks[0].block_type == "RSA PRIVATE KEY"
        content = blocks[0].content_of(pem)
        assert base64.b64decode("".join(content.split())) == data

    def test_concatenated_blocks(self) -> None:
        pem = "\n".join(
            encode_pem(payload, block_type, newline="\n")
            for payload, block_type in [(b"key", "PRIVATE KEY"), (b"cert", "CERTIFICATE")]
        ) + "\n"

        assert [b.block_type for b in scan_pem(pem)] == ["PRIVATE KEY", "CERTIFICATE"]
