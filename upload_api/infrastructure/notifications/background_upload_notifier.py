# upload_api/infrastructure/notifications/background_upload_notifier.py
from __future__ import annotations

import logging
import threading

from upload_api.core.exceptions import NotifierError
from upload_api.core.interfaces.upload_notifier import UploadCompletedEvent, UploadNotifier

logger = logging.getLogger(__name__)


class BackgroundUploadNotifier(UploadNotifier):
    """Executa outro notifier numa thread daemon, sem retorno para a requisição.

    Falhas são apenas registradas no log; não há retry.
    """

    def __init__(self, inner: UploadNotifier) -> None:
        self._inner = inner

    def notify_upload_completed(self, event: UploadCompletedEvent) -> None:
        self.dispatch(event)

    def dispatch(self, event: UploadCompletedEvent) -> threading.Thread:
        thread = threading.Thread(
            target=self._run, args=(event,), name="upload-notifier", daemon=True
        )
        thread.start()
        return thread

    def _run(self, event: UploadCompletedEvent) -> None:
        try:
            self._inner.notify_upload_completed(event)
        except NotifierError as exc:
            logger.warning("Upload notification failed: %s", exc)
        except Exception:
            logger.exception("Unexpected error while sending upload notification")
