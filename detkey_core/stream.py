"""
detkey_core.stream
------------------
Deterministic byte stream expanded from a short string seed.

The buffer is a SHA-256 hash chain: block 0 is SHA-256(seed) and every
following 32-byte block is the hash of the block before it. Once the reader
has consumed the whole buffer, the first block is overwritten with the hash
of the entire buffer and reading restarts at offset 0. The remaining blocks
are left as they were.

This is NOT a CSPRNG. Its only job is to reproduce key seeds that were
derived by earlier versions of this tool, bit for bit, so the recycling rule
must not be "improved".
"""

from __future__ import annotations
from typing import Union

from .constants import STREAM_BUFFER_SIZE, HASH_BLOCK_SIZE
from .errors import SeedExpansionError
from .utils import sha256


class SeededByteStream:
    def __init__(self, seed: Union[str, bytes], buffer_size: int = STREAM_BUFFER_SIZE):
        if isinstance(seed, str):
            # surrogateescape gives back the raw bytes of non-UTF-8 argv entries
            try:
                seed = seed.encode("utf-8", "surrogateescape")
            except UnicodeEncodeError as e:
                raise SeedExpansionError(f"seed is not encodable as bytes: {e}", op="expand_seed") from e
        if buffer_size < HASH_BLOCK_SIZE or buffer_size % HASH_BLOCK_SIZE:
            raise SeedExpansionError(
                f"buffer size must be a positive multiple of {HASH_BLOCK_SIZE}, got {buffer_size}",
                op="expand_seed",
            )

        buf = bytearray(buffer_size)
        buf[0:HASH_BLOCK_SIZE] = sha256(seed)
        for i in range(HASH_BLOCK_SIZE, buffer_size, HASH_BLOCK_SIZE):
            buf[i:i + HASH_BLOCK_SIZE] = sha256(bytes(buf[i - HASH_BLOCK_SIZE:i]))

        self._buf = buf
        self._offset = 0

    @property
    def buffer_size(self) -> int:
        return len(self._buf)

    @property
    def offset(self) -> int:
        return self._offset

    def _recycle(self) -> None:
        self._buf[0:HASH_BLOCK_SIZE] = sha256(bytes(self._buf))
        self._offset = 0

    def read(self, n: int) -> bytes:
        """Return exactly ``n`` bytes, recycling the buffer as often as needed."""
        if n < 0:
            raise ValueError(f"cannot read a negative number of bytes: {n}")

        out = bytearray()
        while len(out) < n:
            if self._offset >= len(self._buf):
                self._recycle()
            take = min(n - len(out), len(self._buf) - self._offset)
            out += self._buf[self._offset:self._offset + take]
            self._offset += take
        return bytes(out)
