"""Context URLs and key lookup tables for did:jwk."""

from typing import Mapping, Sequence

DID_CONTEXT_URL = "https://www.w3.org/ns/did/v1"
JSON_WEB_KEY_CONTEXT_URL = "https://w3id.org/security/jwk/v1"
JSON_WEB_KEY_2020_CONTEXT_URL = "https://w3id.org/security/suites/jws-2020/v1"

DEFAULT_VERIFICATION_METHOD_TYPE = "JsonWebKey"

VERIFICATION_METHOD_CONTEXTS: Mapping[str, str] = {
    "JsonWebKey": JSON_WEB_KEY_CONTEXT_URL,
    "JsonWebKey2020": JSON_WEB_KEY_2020_CONTEXT_URL,
}

DID_DOCUMENT_CONTEXTS: Mapping[str, Sequence[str]] = {
    vm_type: (DID_CONTEXT_URL, context)
    for vm_type, context in VERIFICATION_METHOD_CONTEXTS.items()
}

SIGNING_RELATIONSHIPS = (
    "authentication",
    "assertionMethod",
    "capabilityInvocation",
    "capabilityDelegation",
)
KEY_AGREEMENT = "keyAgreement"

# Usage assumed for a curve when the JWK declares neither use nor an ECDH alg
DEFAULT_USE_BY_CURVE: Mapping[str, str] = {
    "Ed25519": "sig",
    "X25519": "enc",
    "P-256": "sig",
    "P-256K": "sig",
    "secp256k1": "sig",
    "P-384": "sig",
    "P-521": "sig",
    "Bls12381G2": "sig",
    "BLS12381_G2": "sig",
}

# Curves implied by a JWS algorithm
CURVES_BY_ALGORITHM: Mapping[str, Sequence[str]] = {
    "EdDSA": ("Ed25519",),
    "ES256": ("P-256",),
    "ES256K": ("P-256K", "secp256k1"),
    "ES384": ("P-384",),
    "ES521": ("P-521",),
}
