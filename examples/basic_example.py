#!/usr/bin/env python3
"""
Basic example demonstrating the ed25519-multikey workflow:
1. Generate a Multikey key pair
2. Export and reload it
3. Upgrade a legacy Ed25519VerificationKey2018 key and sign with it
"""

import json

import base58

from ed25519_multikey import from_document, generate, to_jwk


def main():
    print("=== Ed25519 Multikey - Basic Example ===\n")

    # ============================================================================
    # STEP 1: Generate a key pair
    # ============================================================================
    print("1. Generating key pair...")
    key_pair = generate(controller="did:example:1234")
    print(f"   ✓ ID: {key_pair.id}\n")

    # ============================================================================
    # STEP 2: Export as Multikey and JWK
    # ============================================================================
    print("2. Exporting key pair...")
    exported = key_pair.export(public_key=True, secret_key=True)
    public_only = key_pair.export()
    print(json.dumps(public_only, indent=2))
    print(json.dumps(to_jwk(key_pair), indent=2))
    print()

    # ============================================================================
    # STEP 3: Reload the exported document
    # ============================================================================
    print("3. Reloading exported key pair...")
    reloaded = from_document(exported)
    assert reloaded.export(public_key=True, secret_key=True) == exported
    print("   ✓ Export is lossless\n")

    # ============================================================================
    # STEP 4: Upgrade a legacy 2018 key
    # ============================================================================
    print("4. Upgrading Ed25519VerificationKey2018 key...")
    seed = b"\x01" * 32
    seeded = generate(seed=seed)
    legacy = {
        "id": "did:example:1234#legacy",
        "type": "Ed25519VerificationKey2018",
        "controller": "did:example:1234",
        "publicKeyBase58": base58.b58encode(seeded.public_key).decode(),
        "privateKeyBase58": base58.b58encode(seed + seeded.public_key).decode(),
    }
    upgraded = from_document(legacy)
    print(json.dumps(upgraded.export(), indent=2))

    data = b"test data goes here"
    signature = upgraded.signer().sign(data)
    assert signature == seeded.signer().sign(data)
    assert seeded.verifier().verify(data, signature)
    print("   ✓ Legacy and Multikey signatures match\n")


if __name__ == "__main__":
    main()
