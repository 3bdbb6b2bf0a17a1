"""Authlib key pairs for did:jwk."""

from typing import Any, Dict, Mapping

from did_jwk.constants import DEFAULT_VERIFICATION_METHOD_TYPE
from did_jwk.keys import KeyPair

try:
    from authlib.jose import JsonWebKey
    from authlib.jose.rfc7517 import AsymmetricKey
except ImportError:
    raise ImportError("Authlib key pairs require the 'authlib' extra to be installed")


class AuthlibKeyPair(KeyPair):
    """Authlib implementation of KeyPair."""

    supported = ("EdDSA", "ES256", "ES384", "ES521", "X25519", "secp256k1")

    def __init__(self, key: AsymmetricKey, **kwargs):
        """Initialize the AuthlibKeyPair."""
        super().__init__(**kwargs)
        self.key = key

    @classmethod
    def from_verification_method(cls, vm: Mapping[str, Any]) -> "AuthlibKeyPair":
        """Create a key pair from a did:jwk verification method."""
        jwk = cls.jwk_from_verification_method(vm)
        try:
            key = JsonWebKey.import_key(jwk)
        except Exception as err:
            raise ValueError("Invalid JWK") from err

        return cls(
            key,
            id=vm.get("id"),
            controller=vm.get("controller"),
            type=vm.get("type", DEFAULT_VERIFICATION_METHOD_TYPE),
        )

    @property
    def public_jwk(self) -> Dict[str, Any]:
        """Get the public key as a JWK."""
        return self.key.as_dict(is_private=False)


def register_authlib_handlers(driver):
    """Register AuthlibKeyPair as key pair handler on a DIDJWK driver."""
    for alg_or_crv in AuthlibKeyPair.supported:
        driver.use(alg_or_crv, AuthlibKeyPair.from_verification_method)
    return driver
