"""Fixed headers, context URLs and key sizes."""

# Ed25519 Signature 2018 context v1 URL
ED25519_SIGNATURE_2018_V1_URL = "https://w3id.org/security/suites/ed25519-2018/v1"
# Ed25519 Signature 2020 context v1 URL
ED25519_SIGNATURE_2020_V1_URL = "https://w3id.org/security/suites/ed25519-2020/v1"
# Multikey context v1 URL
MULTIKEY_CONTEXT_V1_URL = "https://w3id.org/security/multikey/v1"

# multibase base58-btc header
MULTIBASE_BASE58BTC_HEADER = "z"
# multicodec ed25519-pub header as varint
MULTICODEC_PUB_HEADER = b"\xed\x01"
# multicodec ed25519-priv header as varint
MULTICODEC_PRIV_HEADER = b"\x80\x26"

# Ed25519 key sizes in bytes
PUBLIC_KEY_SIZE = 32
SECRET_KEY_SIZE = 32
# seed || public key
LEGACY_SECRET_KEY_SIZE = 64

ALGORITHM = "Ed25519"

# Document type names
MULTIKEY_TYPE = "Multikey"
ED25519_VERIFICATION_KEY_2018_TYPE = "Ed25519VerificationKey2018"
ED25519_VERIFICATION_KEY_2020_TYPE = "Ed25519VerificationKey2020"
JSON_WEB_KEY_TYPES = ("JsonWebKey", "JsonWebKey2020")

# JWK fields for Ed25519 keys
JWK_KEY_TYPE = "OKP"
JWK_CURVE = "Ed25519"
