"""Example of did:jwk generation and resolution."""

import asyncio
import json

from aries_askar import KeyAlg

from did_jwk import DIDJWK, MethodResolver
from did_jwk.keys.askar import AskarKeyPair, register_askar_handlers


async def main():
    """Generate a did:jwk from an Askar key and resolve it again."""
    driver = register_askar_handlers(DIDJWK())

    signing_key = AskarKeyPair.generate(KeyAlg.ED25519)
    generated = await driver.from_key_pair(signing_key)
    print("DID:", generated.did)
    print(json.dumps(generated.did_document, indent=2))

    resolver = MethodResolver()
    resolver.use(driver)
    doc = await resolver.resolve_and_parse(generated.did)
    print("Authentication:", [str(ref) for ref in doc.authentication])

    vm = await driver.get(url=f"{generated.did}#0")
    print(json.dumps(vm, indent=2))

    xkey = AskarKeyPair.generate(KeyAlg.X25519)
    generated = await driver.from_jwk(xkey.public_jwk)
    key_pair = generated.method_for("keyAgreement")
    print("Key agreement key:", key_pair.id)


if __name__ == "__main__":
    asyncio.run(main())
