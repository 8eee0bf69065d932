# detkey_core/importer/importer_ipfs.py
import time
import requests
from detkey_core.constants import (
    DEFAULT_IMPORT_TIMEOUT,
    IPFS_IMPORT_FORMAT,
    IPFS_IMPORT_PATH,
)
from detkey_core.errors import (
    KeyImportError,
    KeyImportPermanentError,
    KeyImportTransientError,
)
from detkey_core.importer.importer_base import KeyImporter
from detkey_core.logger import get_logger
from detkey_core.utils import safe_filename

log = get_logger("DetKey.Importer.IPFS")

RETRY_PAUSE_SECONDS = 0.5


class IPFSKeyImporter(KeyImporter):
    """
    Imports PEM keys into a Kubo (go-ipfs) node through its RPC API.

    POST /api/v0/key/import?arg=<name>&format=pem-pkcs8-cleartext with the
    key as a multipart file field. Only HTTP 200 counts as success.
    """

    name = "ipfs"

    def __init__(self, base_url: str, timeout: float = DEFAULT_IMPORT_TIMEOUT, retries: int = 0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(0, int(retries))

    def _post_once(self, name: str, key_data: bytes) -> None:
        url = f"{self.base_url}{IPFS_IMPORT_PATH}"
        params = {"arg": name, "format": IPFS_IMPORT_FORMAT}
        files = {"file": (safe_filename(name) + ".pem", key_data, "application/octet-stream")}

        log.debug(f"[IPFS IMPORT] → {url} | name={name!r}")
        try:
            res = requests.post(url, params=params, files=files, timeout=self.timeout)
        except requests.Timeout as e:
            raise KeyImportTransientError(f"request timed out after {self.timeout}s: {e}") from e
        except requests.ConnectionError as e:
            raise KeyImportTransientError(f"failed to send request: {e}") from e
        except requests.RequestException as e:
            raise KeyImportPermanentError(f"failed to send request: {e}") from e

        if res.status_code == 200:
            log.info(f"[IPFS IMPORT] {res.status_code} name={name!r}")
            return

        msg = (
            f"IPFS API returned error status: {res.status_code}, body: {res.text}\n"
            f"Request URL: {res.url or url}"
        )
        if res.status_code >= 500:
            raise KeyImportTransientError(msg)
        raise KeyImportPermanentError(msg)

    def import_key(self, name: str, key_data: bytes) -> None:
        for attempt in range(self.retries + 1):
            try:
                self._post_once(name, key_data)
                return
            except KeyImportTransientError as e:
                if attempt < self.retries:
                    log.warning(f"[IPFS IMPORT] transient failure for {name!r}, retrying: {e.message}")
                    time.sleep(RETRY_PAUSE_SECONDS)
                    continue
                if self.retries:
                    log.warning(f"[IPFS IMPORT] giving up on {name!r} after {self.retries + 1} attempts")
                raise
