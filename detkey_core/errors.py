# detkey_core/errors.py
from __future__ import annotations
from typing import Optional


class DetKeyError(Exception):
    """
    Base error for every failure raised by detkey_core.

    ``op`` names the operation that failed and ``name`` the key name being
    derived or imported. Both are optional and filled in by the orchestrator
    as the error travels up.
    """

    def __init__(self, message: str, op: Optional[str] = None, name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.op = op
        self.name = name

    def with_context(self, op: Optional[str] = None, name: Optional[str] = None) -> "DetKeyError":
        if self.op is None:
            self.op = op
        if self.name is None:
            self.name = name
        return self

    def __str__(self) -> str:
        if self.op is None and self.name is None:
            return self.message
        where = self.op or "detkey"
        if self.name is not None:
            where = f"{where} [name={self.name!r}]"
        return f"{where}: {self.message}"


class SeedExpansionError(DetKeyError):
    pass


class KeyDerivationError(DetKeyError):
    pass


class EncodingError(DetKeyError):
    pass


class ExportError(DetKeyError):
    pass


class KeyImportError(DetKeyError):
    pass


class KeyImportTransientError(KeyImportError):
    pass


class KeyImportPermanentError(KeyImportError):
    pass
