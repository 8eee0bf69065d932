"""
detkey_core.crypto
------------------
Ed25519 key derivation and private key export.

- derive_keypair(): builds the keypair straight from a 32-byte seed (RFC 8032)
- export_private_key_pem(): PKCS#8 DER wrapped in a "PRIVATE KEY" PEM block
- load_private_key_pem(): inverse of the export, returns the raw seed
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives import serialization
from cryptography.exceptions import UnsupportedAlgorithm
from .constants import SEED_SIZE
from .errors import KeyDerivationError, ExportError


@dataclass(frozen=True)
class KeyPair:
    private_key: bytes   # 32-byte Ed25519 seed
    public_key: bytes    # 32-byte encoded point

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key.hex()})"


# --------- Ed25519 (derive) ----------
def derive_keypair(seed: bytes) -> KeyPair:
    if not isinstance(seed, (bytes, bytearray)) or len(seed) != SEED_SIZE:
        got = len(seed) if isinstance(seed, (bytes, bytearray)) else type(seed).__name__
        raise KeyDerivationError(f"Ed25519 seed must be {SEED_SIZE} bytes, got {got}", op="derive_keypair")
    try:
        sk = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(seed))
    except (ValueError, UnsupportedAlgorithm) as e:
        raise KeyDerivationError(str(e), op="derive_keypair") from e
    return KeyPair(sk.private_bytes_raw(), sk.public_key().public_bytes_raw())

# --------- PKCS#8 / PEM (export) ----------
def export_private_key_pem(priv_raw: bytes) -> str:
    """
    Serialize a raw Ed25519 seed as an unencrypted PKCS#8 PEM block.

    The DER body is the fixed 16-byte PKCS#8 prefix (version 0, OID
    1.3.101.112) followed by the seed as a nested OCTET STRING, so the
    output is a single 64-character base64 line between the
    BEGIN/END PRIVATE KEY markers.
    """
    if not isinstance(priv_raw, (bytes, bytearray)) or len(priv_raw) != SEED_SIZE:
        got = len(priv_raw) if isinstance(priv_raw, (bytes, bytearray)) else type(priv_raw).__name__
        raise ExportError(f"Ed25519 private key must be {SEED_SIZE} bytes, got {got}", op="export_key")
    try:
        sk = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(priv_raw))
        pem = sk.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ExportError(str(e), op="export_key") from e
    return pem.decode("ascii")

def load_private_key_pem(pem: Union[str, bytes]) -> bytes:
    """Parse a PEM produced by export_private_key_pem() and return the 32-byte seed."""
    if isinstance(pem, str):
        pem = pem.encode("ascii")
    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ExportError(f"not a readable PKCS#8 PEM block: {e}", op="load_key") from e
    if not isinstance(key, ed25519.Ed25519PrivateKey):
        raise ExportError(f"expected an Ed25519 private key, got {type(key).__name__}", op="load_key")
    return key.private_bytes_raw()
