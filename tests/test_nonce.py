# Tests for oauth/nonce.py
# Created: 2026-10-19

import re
from unittest.mock import patch

from scango.oauth.nonce import generate_nonce


class TestGenerateNonce:
    def test_fixed_length_lowercase_hex(self):
        for _ in range(100):
            assert re.fullmatch(r"[0-9a-f]{32}", generate_nonce())

    def test_no_repeats(self):
        values = {generate_nonce() for _ in range(10_000)}
        assert len(values) == 10_000

    def test_uses_secrets_module(self):
        with patch("scango.oauth.nonce.secrets.token_hex", return_value="ab" * 16) as mock_hex:
            assert generate_nonce() == "ab" * 16
        mock_hex.assert_called_once_with(16)
