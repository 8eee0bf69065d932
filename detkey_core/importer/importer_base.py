# detkey_core/importer/importer_base.py
from __future__ import annotations


class KeyImporter:
    """
    Key store contract.

    import_key() takes the key name and the exported PEM bytes, returns
    nothing on success and raises KeyImportError (transient or permanent)
    otherwise. Callers do not retry; an importer may retry on its own.
    """
    name: str = "base"

    def import_key(self, name: str, key_data: bytes) -> None:
        raise NotImplementedError

    def close(self) -> None:
        return
