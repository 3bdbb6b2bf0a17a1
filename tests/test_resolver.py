import pytest
from pydid import DIDDocument, VerificationMethod

from did_jwk import DIDJWK, MethodResolver
from did_jwk.resolver import (
    DIDMethodNotSupported,
    DIDResolver,
    InvalidArgument,
)

from .conftest import ED25519_DID, X25519_DID


class TestResolver(DIDResolver):
    method = "test"

    async def is_resolvable(self, did: str) -> bool:
        return True

    async def resolve(self, did: str) -> dict:
        return {"did": did}


@pytest.fixture(scope="session")
def test_resolver():
    yield TestResolver()


@pytest.fixture
def resolver(test_resolver: DIDResolver):
    resolver = MethodResolver()
    resolver.use(DIDJWK(default_verification_method_type="JsonWebKey2020"))
    resolver.use(test_resolver)
    yield resolver


@pytest.mark.asyncio
async def test_method_resolver(resolver: MethodResolver):
    doc = await resolver.resolve("did:test:example_did")
    assert doc["did"] == "did:test:example_did"

    doc = await resolver.resolve(ED25519_DID)
    assert doc["id"] == ED25519_DID

    with pytest.raises(DIDMethodNotSupported):
        await resolver.resolve("This won't work")
    with pytest.raises(DIDMethodNotSupported):
        await resolver.resolve("did:key:z6Mk")


@pytest.mark.asyncio
async def test_method_resolver_is_resolvable(resolver: MethodResolver):
    assert await resolver.is_resolvable(ED25519_DID)
    assert await resolver.is_resolvable("did:test:anything")
    assert not await resolver.is_resolvable("did:jwk:not+valid")
    assert not await resolver.is_resolvable("did:key:z6Mk")
    assert not await resolver.is_resolvable("did:jwk")


def test_use_requires_method():
    class Nameless:
        pass

    with pytest.raises(InvalidArgument):
        MethodResolver().use(Nameless())


@pytest.mark.asyncio
async def test_resolve_and_parse(resolver: MethodResolver):
    doc = await resolver.resolve_and_parse(ED25519_DID)
    assert isinstance(doc, DIDDocument)
    assert str(doc.id) == ED25519_DID
    assert [str(ref) for ref in doc.authentication] == [f"{ED25519_DID}#0"]


@pytest.mark.asyncio
async def test_resolve_and_dereference_verification_method(resolver: MethodResolver):
    vm = await resolver.resolve_and_dereference_verification_method(f"{X25519_DID}#0")
    assert isinstance(vm, VerificationMethod)
    assert vm.type == "JsonWebKey2020"
    assert vm.public_key_jwk["crv"] == "X25519"
