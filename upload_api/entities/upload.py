# upload_api/entities/upload.py
from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator


@dataclass(frozen=True)
class IncomingFile:
    declared_name: str
    content_type: str
    stream: BinaryIO


@dataclass(frozen=True)
class UploadedFile:
    declared_name: str
    storage_name: str
    storage_path: str
    size_bytes: int
    content_type: str


@dataclass(frozen=True)
class UploadBatch:
    files: tuple[UploadedFile, ...]

    def __iter__(self) -> Iterator[UploadedFile]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)
