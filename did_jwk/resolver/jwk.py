"""did:jwk Resolver.

Build and resolve did:jwk style dids. did:jwk spec:
https://github.com/quartzjer/did-jwk/blob/main/spec.md
"""

import copy
import inspect
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from did_jwk.codec import DID_JWK_PREFIX, decode_jwk, did_from_jwk
from did_jwk.constants import (
    DEFAULT_USE_BY_CURVE,
    DEFAULT_VERIFICATION_METHOD_TYPE,
    DID_DOCUMENT_CONTEXTS,
    KEY_AGREEMENT,
    SIGNING_RELATIONSHIPS,
    VERIFICATION_METHOD_CONTEXTS,
)
from did_jwk.handlers import Handler, HandlerRegistry
from did_jwk.resolver import (
    DIDNotFound,
    DIDResolver,
    InvalidArgument,
    MalformedIdentifier,
    UnsupportedKeyType,
)

LOG = logging.getLogger(__name__)

KEY_FRAGMENT = "0"


def _use_from_member(jwk: Mapping[str, Any]) -> Optional[str]:
    return jwk.get("use")


def _use_from_algorithm(jwk: Mapping[str, Any]) -> Optional[str]:
    alg = jwk.get("alg")
    if isinstance(alg, str) and alg.startswith("ECDH"):
        return "enc"
    return None


def _use_from_curve(jwk: Mapping[str, Any]) -> Optional[str]:
    crv = jwk.get("crv")
    if not isinstance(crv, str):
        return None
    return DEFAULT_USE_BY_CURVE.get(crv)


# Consulted in order; the first rule returning a value decides
USE_RULES: Sequence[Callable[[Mapping[str, Any]], Optional[str]]] = (
    _use_from_member,
    _use_from_algorithm,
    _use_from_curve,
)


def key_use(jwk: Mapping[str, Any]) -> Optional[str]:
    """Return the intended use of a JWK, "sig", "enc" or None if unknown."""
    for rule in USE_RULES:
        use = rule(jwk)
        if use:
            return use
    return None


def verification_relationships(use: Optional[str], vm_id: str) -> Dict[str, list]:
    """Return the verification relationships for a key of the given use."""
    if use == "sig":
        return {rel: [vm_id] for rel in SIGNING_RELATIONSHIPS}
    if use == "enc":
        return {KEY_AGREEMENT: [vm_id]}
    return {}


def public_method_for(did_document: Mapping[str, Any], purpose: str) -> dict:
    """Return the verification method of a document for a proof purpose.

    The method is returned with the "@context" matching its type.

    Raises:
        InvalidArgument: did_document or purpose is missing
        DIDNotFound: no known verification method serves the purpose
    """
    if not isinstance(did_document, Mapping) or not did_document:
        raise InvalidArgument("did_document is required")
    if not purpose or not isinstance(purpose, str):
        raise InvalidArgument("purpose is required")

    methods = did_document.get(purpose) or []
    method = methods[0] if methods else None
    if isinstance(method, str):
        method = next(
            (
                vm
                for vm in did_document.get("verificationMethod") or []
                if vm.get("id") == method
            ),
            None,
        )

    if not method:
        raise DIDNotFound(f"No verification method found for purpose {purpose}")

    context = VERIFICATION_METHOD_CONTEXTS.get(method.get("type"))
    if not context:
        raise DIDNotFound(
            f"Unsupported verification method type: {method.get('type')}"
        )

    return {"@context": context, **method}


@dataclass
class GeneratedDID:
    """A DID document built from a JWK and the key pairs made for it."""

    did_document: dict
    key_pairs: Dict[str, Any] = field(default_factory=dict)

    @property
    def did(self) -> str:
        """Return the DID."""
        return self.did_document["id"]

    def method_for(self, purpose: str) -> Optional[Any]:
        """Return the key pair serving a proof purpose, if one was made."""
        method = public_method_for(self.did_document, purpose)
        return self.key_pairs.get(method["id"])


class DIDJWK(DIDResolver):
    """Build and resolve did:jwk."""

    method = "jwk"
    PATTERN = re.compile(r"^did:jwk:(?P<jwk>[A-Za-z0-9\-_]+)(#0)?$")

    def __init__(
        self,
        handlers: Optional[Mapping[str, Handler]] = None,
        default_verification_method_type: str = DEFAULT_VERIFICATION_METHOD_TYPE,
    ):
        """Initialize the driver.

        Args:
            handlers: key pair handlers by JWK alg or crv, registered in order
            default_verification_method_type: type used when none is given
        """
        self._check_verification_method_type(default_verification_method_type)
        self.default_verification_method_type = default_verification_method_type
        self.handlers = HandlerRegistry()
        if handlers:
            self.handlers.register_all(handlers)

    def use(self, alg_or_crv: str, handler: Handler):
        """Register a key pair handler for a JWK alg or crv."""
        self.handlers.register(alg_or_crv, handler)

    @staticmethod
    def _did_for(jwk: Mapping[str, Any]) -> str:
        try:
            return did_from_jwk(jwk)
        except (TypeError, ValueError) as err:
            raise InvalidArgument("jwk is not JSON serializable") from err

    @staticmethod
    def _check_verification_method_type(verification_method_type: str):
        if verification_method_type not in DID_DOCUMENT_CONTEXTS:
            raise InvalidArgument(
                "Unsupported verification method type: "
                f"{verification_method_type}"
            )

    async def _key_pair_for(self, vm: dict) -> Optional[Any]:
        if self.handlers.is_empty:
            return None

        jwk = vm["publicKeyJwk"]
        handler = self.handlers.resolve(jwk)
        if handler is None:
            raise UnsupportedKeyType(
                "No key pair handler registered for "
                f"alg {jwk.get('alg')!r} or crv {jwk.get('crv')!r}"
            )

        LOG.debug("converting %s with %r", vm["id"], handler)
        key_pair = handler(copy.deepcopy(vm))
        if inspect.isawaitable(key_pair):
            key_pair = await key_pair
        return key_pair

    def _document(
        self, jwk: Mapping[str, Any], did: str, verification_method_type: str
    ) -> dict:
        vm_id = f"{did}#{KEY_FRAGMENT}"
        vm = {
            "id": vm_id,
            "type": verification_method_type,
            "controller": did,
            "publicKeyJwk": copy.deepcopy(dict(jwk)),
        }

        doc = {
            "@context": list(DID_DOCUMENT_CONTEXTS[verification_method_type]),
            "id": did,
            "verificationMethod": [vm],
        }
        doc.update(verification_relationships(key_use(jwk), vm_id))
        return doc

    async def _build(
        self, jwk: Mapping[str, Any], did: str, verification_method_type: str
    ) -> GeneratedDID:
        doc = self._document(jwk, did, verification_method_type)
        (vm,) = doc["verificationMethod"]

        key_pairs = {}
        key_pair = await self._key_pair_for(vm)
        if key_pair is not None:
            key_pairs[vm["id"]] = key_pair
        return GeneratedDID(did_document=doc, key_pairs=key_pairs)

    def _verification_method_type(self, verification_method_type: Optional[str]):
        if verification_method_type is None:
            return self.default_verification_method_type
        if not isinstance(verification_method_type, str):
            raise InvalidArgument("verification_method_type must be a string")
        self._check_verification_method_type(verification_method_type)
        return verification_method_type

    async def from_jwk(
        self,
        jwk: Mapping[str, Any],
        verification_method_type: Optional[str] = None,
    ) -> GeneratedDID:
        """Build the DID document of a JWK.

        Args:
            jwk: The public JWK; member order determines the DID
            verification_method_type: JsonWebKey or JsonWebKey2020

        Returns:
            The DID document and any key pair made by a registered handler

        Raises:
            InvalidArgument: jwk or verification_method_type is malformed
            UnsupportedKeyType: handlers are registered but none fits the JWK
        """
        if not isinstance(jwk, Mapping) or not jwk:
            raise InvalidArgument("jwk must be a non-empty mapping")
        if not isinstance(jwk.get("kty"), str):
            raise InvalidArgument("jwk must have a kty")
        vm_type = self._verification_method_type(verification_method_type)

        did = self._did_for(jwk)
        LOG.debug("building document for %s", did)
        return await self._build(jwk, did, vm_type)

    async def from_key_pair(
        self, key_pair: Any, verification_method_type: Optional[str] = None
    ) -> GeneratedDID:
        """Build the DID document of an existing key pair.

        The key pair gets the id, controller and type of its verification method and
        is returned in key_pairs in place of a handler result.
        """
        jwk = getattr(key_pair, "public_jwk", None)
        if not isinstance(jwk, Mapping):
            raise InvalidArgument("key_pair must expose a public_jwk mapping")
        if not isinstance(jwk.get("kty"), str):
            raise InvalidArgument("jwk must have a kty")
        vm_type = self._verification_method_type(verification_method_type)

        did = self._did_for(jwk)
        doc = self._document(jwk, did, vm_type)
        (vm,) = doc["verificationMethod"]
        key_pair.id = vm["id"]
        key_pair.controller = did
        key_pair.type = vm_type
        return GeneratedDID(did_document=doc, key_pairs={vm["id"]: key_pair})

    async def get(
        self,
        did: Optional[str] = None,
        url: Optional[str] = None,
        verification_method_type: Optional[str] = None,
    ) -> dict:
        """Resolve a did:jwk DID or DID URL.

        Args:
            did: The DID or DID URL; url is an alias, give exactly one
            url: Alias of did
            verification_method_type: JsonWebKey or JsonWebKey2020

        Returns:
            The DID document, or the verification method with its "@context"
            when the fragment "#0" is given
        """
        given = [value for value in (did, url) if value is not None]
        if len(given) != 1 or not isinstance(given[0], str) or not given[0]:
            raise InvalidArgument("Exactly one of did or url must be given")
        identifier = given[0]
        vm_type = self._verification_method_type(verification_method_type)

        authority, has_fragment, fragment = identifier.partition("#")
        if not authority.startswith(DID_JWK_PREFIX):
            raise MalformedIdentifier(f"Not a did:jwk: {identifier}")
        if has_fragment and fragment != KEY_FRAGMENT:
            raise MalformedIdentifier(f"Unknown did:jwk fragment: #{fragment}")

        encoded = authority[len(DID_JWK_PREFIX) :]
        if not encoded:
            raise MalformedIdentifier(f"Empty did:jwk: {identifier}")

        jwk = decode_jwk(encoded)
        LOG.debug("resolving %s", identifier)
        generated = await self._build(jwk, authority, vm_type)

        if has_fragment:
            (vm,) = generated.did_document["verificationMethod"]
            return {"@context": VERIFICATION_METHOD_CONTEXTS[vm_type], **vm}
        return generated.did_document

    def public_method_for(self, did_document: Mapping[str, Any], purpose: str) -> dict:
        """Return the verification method of a document for a proof purpose."""
        return public_method_for(did_document, purpose)

    async def resolve(self, did: str) -> dict:
        """Resolve a did:jwk to its DID document."""
        if "#" in did:
            raise InvalidArgument("Expected a DID, not a DID URL")
        return await self.get(did=did)

    async def is_resolvable(self, did: str) -> bool:
        """Return if did is resolvable by this resolver."""
        return bool(self.PATTERN.match(did))
