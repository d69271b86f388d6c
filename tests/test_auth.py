# -*- coding: utf-8 -*-
"""
Tests for request signing.
"""

import re
from unittest.mock import patch

import pytest

from walutomat_client.auth import ApiCredentials, ApiKeyAuth, WalutomatSigner, sign

VECTOR_PATH = "/api/v1/market/orders/close/5137bdb7-acde-41ff-aeb2-0908af0bd3d9"
VECTOR_TIMESTAMP = "1517480182188"
VECTOR_SECRET = "766j0m0hcaz0ml8erklf0ww18"
VECTOR_SIGNATURE = "b789acef01059fbf40b787be6ce8e7a414a0130106a9dd5eb57c40fd2ea4d80a"


class TestSign:
    """Test the sign function."""

    def test_known_vector(self):
        assert sign(VECTOR_PATH, VECTOR_TIMESTAMP, VECTOR_SECRET) == VECTOR_SIGNATURE

    def test_bytes_and_str_secret_agree(self):
        assert sign(VECTOR_PATH, VECTOR_TIMESTAMP, VECTOR_SECRET.encode()) == VECTOR_SIGNATURE

    def test_deterministic(self):
        signatures = {sign(VECTOR_PATH, VECTOR_TIMESTAMP, VECTOR_SECRET) for _ in range(5)}
        assert len(signatures) == 1

    def test_lowercase_hex_64_chars(self):
        signature = sign("/api/v1/account/id", "1", "secret")
        assert re.fullmatch(r"[0-9a-f]{64}", signature)

    @pytest.mark.parametrize(
        "path, timestamp, secret",
        [
            (VECTOR_PATH[:-1] + "8", VECTOR_TIMESTAMP, VECTOR_SECRET),
            (VECTOR_PATH, "1517480182189", VECTOR_SECRET),
            (VECTOR_PATH, VECTOR_TIMESTAMP, "766j0m0hcaz0ml8erklf0ww19"),
        ],
    )
    def test_single_character_change_changes_signature(self, path, timestamp, secret):
        assert sign(path, timestamp, secret) != VECTOR_SIGNATURE

    def test_no_separator_between_path_and_timestamp(self):
        # "/a" + "12" and "/a1" + "2" concatenate to the same message
        assert sign("/a", "12", "k") == sign("/a1", "2", "k")


class TestWalutomatSigner:
    """Test v1 header generation."""

    def test_auth_headers(self):
        signer = WalutomatSigner(ApiCredentials("key", VECTOR_SECRET))

        with patch("walutomat_client.auth.current_millis", return_value=VECTOR_TIMESTAMP):
            headers = signer.get_auth_headers(VECTOR_PATH)

        assert headers == {
            "X-API-KEY": "key",
            "X-API-NONCE": VECTOR_TIMESTAMP,
            "X-API-SIGNATURE": VECTOR_SIGNATURE,
        }

    def test_fresh_nonce_per_call(self):
        signer = WalutomatSigner(ApiCredentials("key", VECTOR_SECRET))

        with patch("walutomat_client.auth.current_millis", side_effect=["1000", "1001"]):
            first = signer.get_auth_headers(VECTOR_PATH)
            second = signer.get_auth_headers(VECTOR_PATH)

        assert first["X-API-NONCE"] == "1000"
        assert second["X-API-NONCE"] == "1001"
        assert first["X-API-SIGNATURE"] != second["X-API-SIGNATURE"]

    def test_nonce_is_millisecond_timestamp(self):
        signer = WalutomatSigner(ApiCredentials("key", VECTOR_SECRET))

        with patch("walutomat_client.auth.time.time", return_value=1517480182.5):
            headers = signer.get_auth_headers(VECTOR_PATH)

        assert headers["X-API-NONCE"] == "1517480182500"

    @pytest.mark.parametrize(
        "key, secret, expected",
        [("key", "secret", True), ("", "secret", False), ("key", "", False)],
    )
    def test_validate_credentials(self, key, secret, expected):
        assert WalutomatSigner(ApiCredentials(key, secret)).validate_credentials() is expected


class TestApiKeyAuth:
    """Test v2 key-only authentication."""

    def test_only_key_header(self):
        auth = ApiKeyAuth(ApiCredentials("key"))
        assert auth.get_auth_headers("/api/v2.0.0/account/balances") == {"X-API-KEY": "key"}

    def test_empty_key_is_invalid(self):
        assert not ApiKeyAuth(ApiCredentials("")).validate_credentials()
