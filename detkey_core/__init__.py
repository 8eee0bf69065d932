"""
detkey core package
===================
Reproducible Ed25519 identities derived from a plain name.

Provides:
- SHA-256 hash-chain byte stream seeded by the name
- Ed25519 keypair derivation and PKCS#8 PEM export
- libp2p-compatible base36 CIDv1 key identifiers
- Key store importers (IPFS RPC, in-memory)

The byte stream is deterministic by construction and must never be used
where unpredictability is required.
"""

from .crypto import KeyPair, derive_keypair, export_private_key_pem, load_private_key_pem
from .errors import (
    DetKeyError,
    SeedExpansionError,
    KeyDerivationError,
    EncodingError,
    ExportError,
    KeyImportError,
    KeyImportTransientError,
    KeyImportPermanentError,
)
from .identifier import IdentifierInfo, encode_identifier, decode_identifier
from .keygen import DetKeyGen, KeyService, derive_identity, identifier_from_pem
from .stream import SeededByteStream

__version__ = "0.1.0"

__all__ = [
    "SeededByteStream",
    "KeyPair",
    "derive_keypair",
    "export_private_key_pem",
    "load_private_key_pem",
    "IdentifierInfo",
    "encode_identifier",
    "decode_identifier",
    "derive_identity",
    "identifier_from_pem",
    "DetKeyGen",
    "KeyService",
    "DetKeyError",
    "SeedExpansionError",
    "KeyDerivationError",
    "EncodingError",
    "ExportError",
    "KeyImportError",
    "KeyImportTransientError",
    "KeyImportPermanentError",
]
