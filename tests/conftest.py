import pytest

ED25519_JWK = {
    "kty": "OKP",
    "crv": "Ed25519",
    "alg": "EdDSA",
    "x": "iPhAYKqIPK9rng_uedhpXzIC2vOMn8VtGoohdnAVlrA",
}
ED25519_DID = (
    "did:jwk:eyJrdHkiOiJPS1AiLCJjcnYiOiJFZDI1NTE5IiwiYWxnIjoiRWREU0EiLCJ4Ijoia"
    "VBoQVlLcUlQSzlybmdfdWVkaHBYeklDMnZPTW44VnRHb29oZG5BVmxyQSJ9"
)
X25519_JWK = {
    "kty": "OKP",
    "crv": "X25519",
    "use": "enc",
    "x": "3p7bfXt9wbTTW2HC7OQ1Nz-DQ8hbeGdNrfx-FG-IK08",
}
X25519_DID = (
    "did:jwk:eyJrdHkiOiJPS1AiLCJjcnYiOiJYMjU1MTkiLCJ1c2UiOiJlbmMiLCJ4IjoiM3A3Y"
    "mZYdDl3YlRUVzJIQzdPUTFOei1EUThoYmVHZE5yZngtRkctSUswOCJ9"
)
P256_JWK = {
    "crv": "P-256",
    "kty": "EC",
    "x": "acbIQiuMs3i8_uszEjJ2tpTtRM4EU3yz91PH6CdH2V0",
    "y": "_KcyLj9vWMptnmKtm46GqDz8wf74I5LKgrl2GzH3nSE",
}


class MockKeyPair:
    def __init__(self, vm: dict, source: str = "mock"):
        self.id = vm["id"]
        self.type = vm["type"]
        self.controller = vm["controller"]
        self.jwk = vm["publicKeyJwk"]
        self.source = source


@pytest.fixture
def ed25519_jwk():
    yield dict(ED25519_JWK)


@pytest.fixture
def x25519_jwk():
    yield dict(X25519_JWK)


@pytest.fixture
def p256_jwk():
    yield dict(P256_JWK)
