"""did:jwk method driver."""

from did_jwk.handlers import Handler, HandlerRegistry
from did_jwk.resolver import (
    DecodingError,
    DIDMethodNotSupported,
    DIDNotFound,
    DIDResolutionError,
    DIDResolver,
    InvalidArgument,
    MalformedIdentifier,
    MethodResolver,
    ParseError,
    UnsupportedKeyType,
)
from did_jwk.resolver.jwk import DIDJWK, GeneratedDID


def driver(**kwargs) -> DIDJWK:
    """Return a did:jwk driver, as other did method drivers do."""
    return DIDJWK(**kwargs)


__all__ = [
    "DIDJWK",
    "DIDMethodNotSupported",
    "DIDNotFound",
    "DIDResolutionError",
    "DIDResolver",
    "DecodingError",
    "GeneratedDID",
    "Handler",
    "HandlerRegistry",
    "InvalidArgument",
    "MalformedIdentifier",
    "MethodResolver",
    "ParseError",
    "UnsupportedKeyType",
    "driver",
]
