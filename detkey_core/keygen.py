"""
detkey_core.keygen
------------------
Name -> identity pipeline and the service that hands keys to a key store.

    name -> SeededByteStream -> 32-byte seed -> Ed25519 keypair
         -> (identifier, PKCS#8 PEM) -> KeyImporter.import_key()

Each call builds its own stream and keypair; nothing is shared, so
derivations for different names can run on separate threads freely.
"""

from __future__ import annotations
from typing import Tuple, Union

from .constants import SEED_SIZE
from .crypto import derive_keypair, export_private_key_pem, load_private_key_pem
from .errors import DetKeyError, KeyImportError
from .identifier import encode_identifier
from .importer.importer_base import KeyImporter
from .logger import get_logger
from .stream import SeededByteStream

log = get_logger("DetKey.KeyGen")


def derive_identity(name: str) -> Tuple[str, str]:
    """Return ``(identifier, pem_text)`` for ``name``. Same name, same output, always."""
    try:
        stream = SeededByteStream(name)
        seed = stream.read(SEED_SIZE)
        keypair = derive_keypair(seed)
        key_id = encode_identifier(keypair.public_key)
        pem = export_private_key_pem(keypair.private_key)
    except DetKeyError as e:
        raise e.with_context(op="derive_identity", name=name)

    log.debug(f"[KEYGEN] derived name={name!r} id={key_id}")
    return key_id, pem


def identifier_from_pem(pem: Union[str, bytes]) -> str:
    """Identifier of the public key belonging to an exported private key."""
    return encode_identifier(derive_keypair(load_private_key_pem(pem)).public_key)


class DetKeyGen:
    """Derives the identity for one name up front and keeps the results."""

    def __init__(self, name: str):
        self.name = name
        self.key_id, pem = derive_identity(name)
        self.key_data = pem.encode("ascii")

    def get_key_id(self) -> str:
        return self.key_id

    def get_key_data(self) -> bytes:
        return self.key_data


class KeyService:
    def __init__(self, generator: DetKeyGen, importer: KeyImporter):
        self.generator = generator
        self.importer = importer

    def generate_and_import(self, name: str) -> str:
        """Hand the generator's key to the importer under ``name``; returns the key id."""
        key_data = self.generator.get_key_data()
        try:
            self.importer.import_key(name, key_data)
        except KeyImportError as e:
            log.error(f"[KEYGEN] import failed name={name!r}: {e.message}")
            raise e.with_context(op="import_key", name=name)
        except DetKeyError as e:
            raise KeyImportError(e.message, op="import_key", name=name) from e

        log.info({
            "event": "key_imported",
            "name": name,
            "key_id": self.generator.get_key_id(),
            "importer": self.importer.name,
        })
        return self.generator.get_key_id()
