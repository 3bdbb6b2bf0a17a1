"""Askar key pairs for did:jwk."""

import json
from typing import Any, Dict, Mapping

from did_jwk.constants import DEFAULT_VERIFICATION_METHOD_TYPE
from did_jwk.keys import KeyPair

try:
    from aries_askar import AskarError, Key, KeyAlg
except ImportError:
    raise ImportError("Askar key pairs require the 'askar' extra to be installed")


class AskarKeyPair(KeyPair):
    """Key pair implementation for Askar."""

    # Handler registrations by JWK alg or crv
    supported = ("EdDSA", "ES256", "ES256K", "ES384", "X25519")

    def __init__(self, key: Key, **kwargs):
        """Initialize a new AskarKeyPair instance."""
        super().__init__(**kwargs)
        self.key = key

    @classmethod
    def generate(cls, alg: KeyAlg, **kwargs) -> "AskarKeyPair":
        """Generate a new key pair."""
        return cls(Key.generate(alg), **kwargs)

    @classmethod
    def from_verification_method(cls, vm: Mapping[str, Any]) -> "AskarKeyPair":
        """Create a key pair from a did:jwk verification method."""
        jwk = cls.jwk_from_verification_method(vm)
        try:
            key = Key.from_jwk(json.dumps(jwk))
        except AskarError as err:
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
        return json.loads(self.key.get_jwk_public())


def register_askar_handlers(driver):
    """Register AskarKeyPair as key pair handler on a DIDJWK driver."""
    for alg_or_crv in AskarKeyPair.supported:
        driver.use(alg_or_crv, AskarKeyPair.from_verification_method)
    return driver
