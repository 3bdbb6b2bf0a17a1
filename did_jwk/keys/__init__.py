"""Key pair representations for did:jwk verification methods."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from did_jwk.constants import DEFAULT_VERIFICATION_METHOD_TYPE


class KeyPair(ABC):
    """Key pair made from a JWK verification method."""

    def __init__(
        self,
        id: Optional[str] = None,
        controller: Optional[str] = None,
        type: str = DEFAULT_VERIFICATION_METHOD_TYPE,
    ):
        """Initialize the key pair."""
        self.id = id
        self.controller = controller
        self.type = type

    @classmethod
    @abstractmethod
    def from_verification_method(cls, vm: Mapping[str, Any]) -> "KeyPair":
        """Create a KeyPair from a did:jwk verification method."""

    @staticmethod
    def jwk_from_verification_method(vm: Mapping[str, Any]) -> Dict[str, Any]:
        """Get the public JWK of a verification method."""
        jwk = vm.get("publicKeyJwk")
        if not isinstance(jwk, Mapping):
            raise ValueError("JWK verification method missing key")
        return dict(jwk)

    @property
    @abstractmethod
    def public_jwk(self) -> Dict[str, Any]:
        """Get the public key as a JWK."""

    def export(self) -> Dict[str, Any]:
        """Export the public key as a verification method."""
        return {
            "id": self.id,
            "type": self.type,
            "controller": self.controller,
            "publicKeyJwk": self.public_jwk,
        }


__all__ = ["KeyPair"]
