# upload_api/infrastructure/storage/local_file_storage.py
from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from upload_api.core.exceptions import StorageConfigError, StorageWriteError
from upload_api.infrastructure.storage.file_storage import FileStorage, StoredFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB
MAX_NAME_BYTES = 255


class MillisecondSequence:
    """Timestamps em ms que nunca se repetem dentro do processo.

    Se o relógio não avançou (ou voltou), devolve o último valor + 1.
    """

    def __init__(self, clock=time.time_ns) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        now = self._clock() // 1_000_000
        with self._lock:
            self._last = max(now, self._last + 1)
            return self._last


_default_sequence = MillisecondSequence()


def _truncate_utf8(text: str, max_bytes: int) -> str:
    return text.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore")


def storage_name_for(declared_name: str, timestamp_ms: int) -> str:
    # tudo fica num diretório plano: separadores viram "_"
    flat = declared_name.replace("/", "_").replace("\\", "_")
    prefix = f"{timestamp_ms}-"

    # nome no disco limitado a MAX_NAME_BYTES; a extensão é preservada
    budget = MAX_NAME_BYTES - len(prefix.encode("utf-8"))
    if len(flat.encode("utf-8")) > budget:
        stem, ext = os.path.splitext(flat)
        if len(ext.encode("utf-8")) > budget // 2:
            stem, ext = flat, ""
        stem = _truncate_utf8(stem, budget - len(ext.encode("utf-8")))
        flat = stem + ext
    return prefix + flat


@dataclass(frozen=True)
class LocalFileStorageConfig:
    base_path: str


class LocalFileStorage(FileStorage):
    def __init__(
        self,
        *,
        config: LocalFileStorageConfig,
        sequence: MillisecondSequence | None = None,
    ) -> None:
        # resolve e prepara base (uma vez, no startup)
        raw = (config.base_path or "").strip()
        if not raw:
            raise StorageConfigError("Upload storage is not configured (UPLOAD_DIR is empty).")

        self._base = Path(raw).expanduser().resolve()
        self._sequence = sequence or _default_sequence

        try:
            # exist_ok: dois processos subindo juntos não quebram
            self._base.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            raise StorageConfigError(
                f"No permission to create or access the upload folder '{self._base}'."
            )
        except OSError as e:
            raise StorageConfigError(
                f"Failed to initialise local storage at '{self._base}': {e}"
            )

        if not self._base.is_dir():
            raise StorageConfigError(f"Invalid upload folder: '{self._base}' is not a directory.")

        if not os.access(self._base, os.W_OK):
            raise StorageConfigError(f"Upload folder '{self._base}' is not writable.")

        logger.info("Upload storage ready at %s", self._base)

    @property
    def base_path(self) -> Path:
        return self._base

    def _abs_path_from_stored(self, stored_name: str) -> Path:
        abs_path = (self._base / stored_name).resolve()

        # anti path traversal
        if abs_path.parent != self._base:
            raise ValueError("stored_name inválido (path traversal).")

        return abs_path

    def save(self, *, fileobj: BinaryIO, declared_name: str) -> StoredFile:
        stored_name = storage_name_for(declared_name, self._sequence.next())
        try:
            abs_path = self._abs_path_from_stored(stored_name)
        except ValueError:
            raise StorageWriteError(f"Refusing to store '{declared_name}' outside the upload folder.")

        size = 0
        try:
            # "xb": nunca sobrescreve um arquivo existente
            with open(abs_path, "xb") as out:
                while True:
                    chunk = fileobj.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    out.write(chunk)
                    size += len(chunk)
        except FileExistsError:
            raise StorageWriteError(f"Storage name collision for '{stored_name}'.")
        except OSError as e:
            # melhor esforço: remove arquivo parcial se existir
            self._remove_partial(abs_path)
            logger.error("Failed to write %s: %s", abs_path, e)
            raise StorageWriteError(f"Failed to store file '{declared_name}'.")

        return StoredFile(stored_name=stored_name, abs_path=str(abs_path), size_bytes=size)

    def delete(self, *, stored_name: str) -> bool:
        # best-effort delete; não quebra fluxo
        try:
            abs_path = self._abs_path_from_stored(stored_name)
        except ValueError:
            return False
        try:
            abs_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Could not delete %s: %s", abs_path, e)
            return False
        return True

    def _remove_partial(self, abs_path: Path) -> None:
        try:
            abs_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove partial file %s: %s", abs_path, e)
