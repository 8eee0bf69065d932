"""
detkey_core.identifier
----------------------
Textual identifiers for Ed25519 public keys, compatible with libp2p key IDs.

    record     = protobuf PublicKey{Type: Ed25519, Data: <32 bytes>}
    multihash  = identity(record)   if len(record) <= 42
                 sha2-256(record)   otherwise
    identifier = base36( CIDv1(codec="libp2p-key", multihash) )

Ed25519 records are 36 bytes and are therefore inlined, which gives the
familiar "k51qzi5uqu5d..." prefix. CID, multihash, multibase and varint
handling all come from the multiformats package.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from multiformats import CID, multihash, varint

from .constants import (
    CID_VERSION,
    HASH_FUNCTION,
    IDENTIFIER_BASE,
    IDENTIFIER_CODEC,
    KEY_TYPE_ED25519,
    MAX_INLINE_KEY_LENGTH,
    PUBLIC_KEY_SIZE,
)
from .errors import EncodingError

# protobuf field tags: 1 = Type (varint), 2 = Data (length-delimited)
_TAG_TYPE = 0x08
_TAG_DATA = 0x12


@dataclass(frozen=True)
class IdentifierInfo:
    version: int
    codec: str
    hashfun: str
    multihash: bytes
    public_key: Optional[bytes] = None   # only when the record is inlined


def marshal_public_key(pub_raw: bytes) -> bytes:
    if not isinstance(pub_raw, (bytes, bytearray)) or len(pub_raw) != PUBLIC_KEY_SIZE:
        got = len(pub_raw) if isinstance(pub_raw, (bytes, bytearray)) else type(pub_raw).__name__
        raise EncodingError(f"Ed25519 public key must be {PUBLIC_KEY_SIZE} bytes, got {got}", op="encode_identifier")
    return (
        bytes([_TAG_TYPE]) + varint.encode(KEY_TYPE_ED25519)
        + bytes([_TAG_DATA]) + varint.encode(len(pub_raw)) + bytes(pub_raw)
    )

def unmarshal_public_key(record: bytes) -> bytes:
    try:
        if record[0] != _TAG_TYPE:
            raise EncodingError("public key record does not start with a key type", op="decode_identifier")
        key_type, n, _ = varint.decode_raw(record[1:])
        pos = 1 + n
        if key_type != KEY_TYPE_ED25519:
            raise EncodingError(f"unsupported key type {key_type}", op="decode_identifier")
        if record[pos] != _TAG_DATA:
            raise EncodingError("public key record has no key data", op="decode_identifier")
        length, n, _ = varint.decode_raw(record[pos + 1:])
        pos += 1 + n
    except IndexError as e:
        raise EncodingError("public key record is truncated", op="decode_identifier") from e
    except ValueError as e:
        raise EncodingError(f"bad varint in public key record: {e}", op="decode_identifier") from e

    data = bytes(record[pos:])
    if len(data) != length or length != PUBLIC_KEY_SIZE:
        raise EncodingError(
            f"public key record holds {len(data)} bytes, expected {PUBLIC_KEY_SIZE}", op="decode_identifier"
        )
    return data


def encode_identifier(pub_raw: bytes, max_inline: int = MAX_INLINE_KEY_LENGTH) -> str:
    """
    Compute the base36 CIDv1 identifier for an Ed25519 public key.

    ``max_inline`` is the largest record size wrapped with the identity
    multihash; pass 0 to hash every record with sha2-256.
    """
    record = marshal_public_key(pub_raw)
    try:
        if len(record) <= max_inline:
            mh = multihash.wrap(record, "identity")
        else:
            mh = multihash.digest(record, HASH_FUNCTION)
        cid = CID(IDENTIFIER_BASE, CID_VERSION, IDENTIFIER_CODEC, mh)
        return cid.encode()
    except (ValueError, KeyError, TypeError) as e:
        raise EncodingError(f"cannot build identifier: {e}", op="encode_identifier") from e


def decode_identifier(text: str) -> IdentifierInfo:
    try:
        cid = CID.decode(text)
    except Exception as e:  # multiformats and bases raise assorted error types
        raise EncodingError(f"not a valid content identifier: {e}", op="decode_identifier") from e

    if cid.codec.name != IDENTIFIER_CODEC:
        raise EncodingError(f"unexpected codec {cid.codec.name!r}", op="decode_identifier")

    public_key = None
    if cid.hashfun.name == "identity":
        public_key = unmarshal_public_key(cid.raw_digest)

    return IdentifierInfo(
        version=cid.version,
        codec=cid.codec.name,
        hashfun=cid.hashfun.name,
        multihash=bytes(cid.digest),
        public_key=public_key,
    )
