# detkey_core/constants.py

# Seeded byte stream
STREAM_BUFFER_SIZE = 8192
HASH_BLOCK_SIZE = 32

# Ed25519
SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32

# libp2p public key record (protobuf KeyType enum)
KEY_TYPE_ED25519 = 1

# Identifier
CID_VERSION = 1
IDENTIFIER_CODEC = "libp2p-key"
IDENTIFIER_BASE = "base36"
MAX_INLINE_KEY_LENGTH = 42   # records up to this size use the identity multihash
HASH_FUNCTION = "sha2-256"

# Key store
DEFAULT_IPFS_API = "http://127.0.0.1:5001"
IPFS_IMPORT_PATH = "/api/v0/key/import"
IPFS_IMPORT_FORMAT = "pem-pkcs8-cleartext"
DEFAULT_IMPORT_TIMEOUT = 5.0
