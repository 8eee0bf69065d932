"""
detkey_core.utils
-----------------
Small helpers shared by the byte stream and the IPFS importer.
"""

from __future__ import annotations
import hashlib


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()

def safe_filename(name: str) -> str:
    # path and drive separators are not allowed in multipart file names
    return name.replace("/", "_").replace(":", "_")
