"""DID Resolver."""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Optional

from pydid import DIDDocument, DIDUrl, Resource, VerificationMethod

LOG = logging.getLogger(__name__)


class DIDResolutionError(Exception):
    """Represents an error from a DID Resolver."""


class InvalidArgument(DIDResolutionError):
    """Represents a missing or malformed argument."""


class MalformedIdentifier(DIDResolutionError):
    """Represents a DID or DID URL that does not follow the method syntax."""


class DecodingError(DIDResolutionError):
    """Represents an identifier payload that could not be decoded."""


class ParseError(DIDResolutionError):
    """Represents an identifier payload that could not be parsed."""


class UnsupportedKeyType(DIDResolutionError):
    """Represents a key with no registered key pair handler."""


class DIDNotFound(DIDResolutionError):
    """Represents a DID or verification method not found error."""


class DIDMethodNotSupported(DIDResolutionError):
    """Represents a DID method not supported error."""


class DIDResolver(ABC):
    """DID Resolver interface."""

    method: ClassVar[str]

    @abstractmethod
    async def resolve(self, did: str) -> dict:
        """Resolve a DID."""

    @abstractmethod
    async def is_resolvable(self, did: str) -> bool:
        """Check to see if a DID is resolvable."""

    async def resolve_and_parse(self, did: str) -> DIDDocument:
        """Resolve a DID and parse the DID document."""
        doc = await self.resolve(did)
        return DIDDocument.deserialize(doc)

    async def resolve_and_dereference(self, did_url: str) -> Resource:
        """Resolve a DID URL and dereference the identifier."""
        url = DIDUrl.parse(did_url)
        if not url.did:
            raise DIDResolutionError("Invalid DID URL; must be absolute")

        doc = await self.resolve_and_parse(url.did)
        return doc.dereference(url)

    async def resolve_and_dereference_verification_method(
        self, did_url: str
    ) -> VerificationMethod:
        """Resolve a DID URL and dereference the identifier."""
        resource = await self.resolve_and_dereference(did_url)
        if not isinstance(resource, VerificationMethod):
            raise DIDResolutionError("Resource is not a verification method")

        return resource


class MethodResolver(DIDResolver):
    """DID Resolver delegating to drivers by DID method name."""

    method = "*"

    def __init__(self, drivers: Optional[Dict[str, DIDResolver]] = None):
        """Initialize the resolver."""
        self.drivers: Dict[str, DIDResolver] = dict(drivers or {})

    def use(self, driver: DIDResolver) -> DIDResolver:
        """Register a driver under its DID method name."""
        method = getattr(driver, "method", None)
        if not isinstance(method, str) or not method:
            raise InvalidArgument("Driver must declare a DID method name")
        LOG.debug("using driver %s for did:%s", type(driver).__name__, method)
        self.drivers[method] = driver
        return driver

    def _driver_for(self, did: str) -> Optional[DIDResolver]:
        scheme, _, rest = did.partition(":")
        if scheme != "did":
            return None
        method, sep, _ = rest.partition(":")
        if not sep:
            return None
        return self.drivers.get(method)

    async def is_resolvable(self, did: str) -> bool:
        """Check to see if a DID is resolvable."""
        driver = self._driver_for(did)
        if driver is None:
            return False
        return await driver.is_resolvable(did)

    async def resolve(self, did: str) -> dict:
        """Resolve a DID."""
        driver = self._driver_for(did)
        if driver is None:
            raise DIDMethodNotSupported(f"No resolver found for DID {did}")
        return await driver.resolve(did)
