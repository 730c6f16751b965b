"""
Tests for decode_base64.
"""

import base64

import pytest

from deeplink.utils.base64_codec import decode_base64


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class TestDecodeBase64:
    def test_decodes_text(self):
        assert decode_base64(b64("http://localhost:3978/api/messages")) == (
            "http://localhost:3978/api/messages"
        )

    def test_none_is_empty(self):
        assert decode_base64(None) == ""

    def test_empty_is_empty(self):
        assert decode_base64("") == ""

    def test_missing_padding(self):
        assert decode_base64(b64("ab").rstrip("=")) == "ab"

    def test_space_restored_to_plus(self):
        encoded = b64("??>")  # contains '+'
        assert "+" in encoded

        assert decode_base64(encoded.replace("+", " ")) == "??>"

    def test_url_safe_alphabet(self):
        encoded = base64.urlsafe_b64encode("??>".encode()).decode()

        assert decode_base64(encoded) == "??>"

    @pytest.mark.parametrize("value", ["not base64!", "%%%", "/w=="])
    def test_malformed_falls_back_to_input(self, value):
        # "/w==" decodes to 0xff, which is not UTF-8
        assert decode_base64(value) == value
