"""Encoding and decoding of the did:jwk identifier payload."""

import base64
import json
import re
from typing import Any, Dict, Mapping

from did_jwk.resolver import DecodingError, ParseError

DID_JWK_PREFIX = "did:jwk:"


class Base64UrlEncoder:
    """Base64URL encoding without padding."""

    name = "base64url"
    alphabet = re.compile(r"[A-Za-z0-9\-_]*")

    def encode(self, value: bytes) -> str:
        """Encode a byte string using the base64url encoding."""
        return base64.urlsafe_b64encode(value).decode().rstrip("=")

    def decode(self, value: str) -> bytes:
        """Decode a base64url encoded string."""
        if not self.alphabet.fullmatch(value):
            raise ValueError("Invalid base64url character in value")

        # Ensure correct padding
        padding_needed = 4 - (len(value) % 4)
        if padding_needed != 4:
            value += "=" * padding_needed

        return base64.urlsafe_b64decode(value)


b64url = Base64UrlEncoder()


def encode_jwk(jwk: Mapping[str, Any]) -> str:
    """Serialize a JWK to compact JSON and base64url encode it.

    Member order is kept as given; no canonicalization is applied.
    """
    serialized = json.dumps(dict(jwk), separators=(",", ":"), ensure_ascii=False)
    return b64url.encode(serialized.encode("utf-8"))


def decode_jwk(encoded: str) -> Dict[str, Any]:
    """Recover a JWK from the method specific id of a did:jwk.

    Args:
        encoded: The base64url encoded JSON of the JWK

    Returns:
        The decoded JWK

    Raises:
        DecodingError: the value is not base64url encoded UTF-8
        ParseError: the decoded value is not a JSON object with a kty
    """
    try:
        text = b64url.decode(encoded).decode("utf-8")
    except ValueError as err:
        raise DecodingError(f"Could not decode did:jwk payload: {err}") from err

    try:
        jwk = json.loads(text)
    except json.JSONDecodeError as err:
        raise ParseError(f"did:jwk payload is not valid JSON: {err}") from err

    if not isinstance(jwk, dict):
        raise ParseError("did:jwk payload must be a JSON object")

    if not isinstance(jwk.get("kty"), str):
        raise ParseError("did:jwk payload is missing kty")

    return jwk


def did_from_jwk(jwk: Mapping[str, Any]) -> str:
    """Return the did:jwk for a JWK."""
    return DID_JWK_PREFIX + encode_jwk(jwk)
