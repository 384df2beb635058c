# upload_api/infrastructure/storage/file_storage.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, BinaryIO


@dataclass(frozen=True)
class StoredFile:
    stored_name: str
    abs_path: str
    size_bytes: int


class FileStorage(Protocol):
    def save(self, *, fileobj: BinaryIO, declared_name: str) -> StoredFile:
        """Persiste um arquivo sob um nome gerado pelo servidor e retorna onde ficou."""
        raise NotImplementedError

    def delete(self, *, stored_name: str) -> bool:
        """Remove arquivo do storage (best-effort). Retorna True se removeu, False se não existia."""
        raise NotImplementedError
