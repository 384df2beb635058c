# upload_api/infrastructure/notifications/webhook_upload_notifier.py
from __future__ import annotations

import logging

import httpx

from upload_api.core.exceptions import NotifierError
from upload_api.core.interfaces.upload_notifier import UploadCompletedEvent, UploadNotifier

logger = logging.getLogger(__name__)

# mantém no máximo 10 nomes para não inflar a mensagem
MAX_NAMES_IN_TEXT = 10


def build_summary_text(event: UploadCompletedEvent) -> str:
    text = f"{event.files_uploaded} file(s) uploaded"
    sample = event.file_names[:MAX_NAMES_IN_TEXT]
    if sample:
        text += ": " + ", ".join(sample)
        hidden = len(event.file_names) - len(sample)
        if hidden > 0:
            text += f" (+{hidden} more)"
    return text


class WebhookUploadNotifier(UploadNotifier):
    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._transport = transport

    def notify_upload_completed(self, event: UploadCompletedEvent) -> None:
        payload = {"text": build_summary_text(event)}
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.post(self._url, json=payload)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NotifierError(
                f"Webhook answered {exc.response.status_code} for {self._url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise NotifierError(f"Webhook request to {self._url} failed: {exc}") from exc

        logger.info("Upload notification sent (%d file(s))", event.files_uploaded)
