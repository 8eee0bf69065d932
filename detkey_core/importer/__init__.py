# detkey_core/importer/__init__.py
from __future__ import annotations
from detkey_core.config import DetKeyConfig, load_config
from detkey_core.importer.importer_base import KeyImporter
from detkey_core.importer.importer_ipfs import IPFSKeyImporter
from detkey_core.importer.importer_memory import InMemoryKeyImporter


def importer_factory(config: DetKeyConfig | dict | None = None) -> KeyImporter:
    """
    importer:
      - "ipfs"   → Kubo RPC API at config.api_url (default)
      - "memory" → in-process store, no network
    """
    if not isinstance(config, DetKeyConfig):
        config = load_config(config)

    if config.importer == "memory":
        return InMemoryKeyImporter()

    if config.importer == "ipfs":
        return IPFSKeyImporter(config.api_url, timeout=config.timeout, retries=config.retries)

    raise ValueError(f"Unknown importer: {config.importer}")


__all__ = [
    "KeyImporter",
    "IPFSKeyImporter",
    "InMemoryKeyImporter",
    "importer_factory",
]
