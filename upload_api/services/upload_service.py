# upload_api/services/upload_service.py
from __future__ import annotations

import logging
import re

from upload_api.core.exceptions import (
    InvalidFileNameError,
    NoFilesProvidedError,
    TooManyFilesError,
)
from upload_api.entities.upload import IncomingFile, UploadBatch, UploadedFile
from upload_api.infrastructure.storage.file_storage import FileStorage

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


def validate_declared_name(name: str) -> None:
    """Rejeita nomes que tentam sair da árvore lógica do upload."""
    if "\x00" in name:
        raise InvalidFileNameError(name.replace("\x00", "\\0"))
    if name.startswith(("/", "\\")) or _DRIVE_PREFIX.match(name):
        raise InvalidFileNameError(name)
    segments = re.split(r"[/\\]", name)
    if any(seg == ".." for seg in segments):
        raise InvalidFileNameError(name)


class UploadService:
    def __init__(self, *, storage: FileStorage, max_files: int) -> None:
        self._storage = storage
        self._max_files = max_files

    def receive(self, parts: list[IncomingFile]) -> UploadBatch:
        if not parts:
            logger.warning("Upload attempted but no files were sent")
            raise NoFilesProvidedError()

        if len(parts) > self._max_files:
            logger.warning("Upload rejected: %d files (max %d)", len(parts), self._max_files)
            raise TooManyFilesError(self._max_files)

        # valida tudo antes de gravar qualquer byte
        for part in parts:
            validate_declared_name(part.declared_name)

        out: list[UploadedFile] = []
        saved_stored_names: list[str] = []

        try:
            for part in parts:
                stored = self._storage.save(fileobj=part.stream, declared_name=part.declared_name)
                saved_stored_names.append(stored.stored_name)
                out.append(
                    UploadedFile(
                        declared_name=part.declared_name,
                        storage_name=stored.stored_name,
                        storage_path=stored.abs_path,
                        size_bytes=stored.size_bytes,
                        content_type=part.content_type or DEFAULT_CONTENT_TYPE,
                    )
                )
        except Exception:
            # tudo ou nada: desfaz o que já foi gravado neste lote
            for stored_name in saved_stored_names:
                self._storage.delete(stored_name=stored_name)
            raise

        batch = UploadBatch(files=tuple(out))
        self._log_received(batch)
        return batch

    @staticmethod
    def _log_received(batch: UploadBatch) -> None:
        logger.info("Received %d file(s):", len(batch))
        for f in batch:
            logger.info(" - %s (%.2f KB, %s)", f.storage_name, f.size_bytes / 1024, f.content_type)
