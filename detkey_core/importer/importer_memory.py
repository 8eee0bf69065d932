# detkey_core/importer/importer_memory.py
from __future__ import annotations
from typing import Dict
from detkey_core.errors import KeyImportPermanentError
from detkey_core.importer.importer_base import KeyImporter
from detkey_core.logger import get_logger

log = get_logger("DetKey.Importer.Memory")


class InMemoryKeyImporter(KeyImporter):
    """Process-local key store; refuses to overwrite an existing name."""

    name = "memory"

    def __init__(self):
        self.keys: Dict[str, bytes] = {}

    def import_key(self, name: str, key_data: bytes) -> None:
        if name in self.keys:
            raise KeyImportPermanentError(f"key with name {name!r} already exists")
        self.keys[name] = bytes(key_data)
        log.info(f"[MEMORY IMPORT] stored key name={name!r} bytes={len(key_data)}")

    def get_key(self, name: str):
        return self.keys.get(name)
