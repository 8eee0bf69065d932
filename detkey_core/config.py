# detkey_core/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
from .constants import DEFAULT_IPFS_API, DEFAULT_IMPORT_TIMEOUT

IMPORTERS = ("ipfs", "memory")


@dataclass
class DetKeyConfig:
    importer: str = "ipfs"            # ipfs | memory
    api_url: str = DEFAULT_IPFS_API
    timeout: float = DEFAULT_IMPORT_TIMEOUT
    retries: int = 0
    log_level: str = "INFO"


def _pick(config: dict, key: str, env: str, default):
    value = config.get(key)
    if value is None:
        value = os.getenv(env)
    return default if value is None or value == "" else value


def load_config(config: dict | None = None) -> DetKeyConfig:
    """
    Resolve runtime settings: explicit dict keys, then DETKEY_* environment
    variables, then defaults.
    """
    config = config or {}

    timeout = _pick(config, "timeout", "DETKEY_IMPORT_TIMEOUT", DEFAULT_IMPORT_TIMEOUT)
    retries = _pick(config, "retries", "DETKEY_IMPORT_RETRIES", 0)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout: {timeout!r}")
    try:
        retries = int(retries)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid retries: {retries!r}")
    if timeout <= 0:
        raise ValueError(f"Invalid timeout: {timeout!r}")
    if retries < 0:
        raise ValueError(f"Invalid retries: {retries!r}")

    importer = str(_pick(config, "importer", "DETKEY_IMPORTER", "ipfs")).lower()
    if importer not in IMPORTERS:
        raise ValueError(f"Unknown importer: {importer!r} (expected one of {', '.join(IMPORTERS)})")

    return DetKeyConfig(
        importer=importer,
        api_url=str(_pick(config, "api_url", "DETKEY_IPFS_API", DEFAULT_IPFS_API)),
        timeout=timeout,
        retries=retries,
        log_level=str(_pick(config, "log_level", "DETKEY_LOG_LEVEL", "INFO")).upper(),
    )
