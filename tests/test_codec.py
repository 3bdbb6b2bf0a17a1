import pytest

from did_jwk.codec import b64url, decode_jwk, did_from_jwk, encode_jwk
from did_jwk.resolver import DecodingError, ParseError

from .conftest import ED25519_DID, ED25519_JWK, X25519_DID, X25519_JWK


def test_did_from_jwk():
    assert did_from_jwk(ED25519_JWK) == ED25519_DID
    assert did_from_jwk(X25519_JWK) == X25519_DID


def test_encode_keeps_member_order():
    swapped = dict(reversed(list(ED25519_JWK.items())))
    assert encode_jwk(swapped) != encode_jwk(ED25519_JWK)
    assert decode_jwk(encode_jwk(swapped)) == ED25519_JWK


def test_decode_keeps_unknown_members():
    jwk = {"kty": "OKP", "crv": "Ed25519", "x": "abc", "kid": "k1", "ext": True}
    decoded = decode_jwk(encode_jwk(jwk))
    assert decoded == jwk
    assert list(decoded) == list(jwk)


def test_encode_non_ascii_as_utf8():
    jwk = {"kty": "oct", "name": "clé"}
    assert b64url.decode(encode_jwk(jwk)) == '{"kty":"oct","name":"clé"}'.encode()
    assert decode_jwk(encode_jwk(jwk)) == jwk


def test_b64url_unpadded():
    assert b64url.encode(b"[1,2]") == "WzEsMl0"
    assert b64url.decode("WzEsMl0") == b"[1,2]"


@pytest.mark.parametrize("encoded", ["eyJ+", "eyJ/", "WzEsMl0=", "a", "e y"])
def test_decode_invalid_base64url(encoded):
    with pytest.raises(DecodingError) as exc_info:
        decode_jwk(encoded)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_decode_invalid_utf8():
    with pytest.raises(DecodingError) as exc_info:
        decode_jwk("__4")
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_decode_invalid_json():
    with pytest.raises(ParseError) as exc_info:
        decode_jwk(b64url.encode(b"not json"))
    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize("payload", [b"[1,2]", b'"kty"', b'{"crv":"P-256"}'])
def test_decode_not_a_jwk(payload):
    with pytest.raises(ParseError):
        decode_jwk(b64url.encode(payload))
