# upload_api/core/interfaces/upload_notifier.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class UploadCompletedEvent:
    files_uploaded: int
    file_names: tuple[str, ...] = field(default_factory=tuple)


class UploadNotifier(Protocol):
    def notify_upload_completed(self, event: UploadCompletedEvent) -> None:
        ...
