# upload_api/main.py
from __future__ import annotations

import logging

from flask import Flask
from flask_cors import CORS

from upload_api.api.middlewares.error_handler import register_error_handlers
from upload_api.api.routes import register_routes
from upload_api.config.flask_config import configure_app
from upload_api.config.logging_config import setup_logging
from upload_api.config.settings import Settings, settings as default_settings
from upload_api.core.interfaces.upload_notifier import UploadNotifier
from upload_api.infrastructure.notifications.background_upload_notifier import (
    BackgroundUploadNotifier,
)
from upload_api.infrastructure.notifications.webhook_upload_notifier import (
    WebhookUploadNotifier,
)
from upload_api.infrastructure.storage.local_file_storage import (
    LocalFileStorage,
    LocalFileStorageConfig,
)
from upload_api.services.upload_service import UploadService

logger = logging.getLogger(__name__)


def _build_notifier(settings: Settings, notifier: UploadNotifier | None) -> UploadNotifier | None:
    if notifier is None and settings.notifier_url:
        notifier = WebhookUploadNotifier(
            url=settings.notifier_url,
            timeout_seconds=settings.notifier_timeout_seconds,
        )
    if notifier is None:
        return None
    # sempre fora do ciclo da requisição
    return BackgroundUploadNotifier(notifier)


def create_app(
    settings: Settings | None = None,
    *,
    notifier: UploadNotifier | None = None,
) -> Flask:
    settings = settings or default_settings
    app = Flask(__name__)

    # ✅ CORS aplicado cedo (antes das rotas lidarem com OPTIONS)
    CORS(
        app,
        origins=settings.cors_origins,
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "OPTIONS"],
    )

    configure_app(app, settings)

    # diretório de uploads criado uma única vez, aqui no startup
    storage = LocalFileStorage(config=LocalFileStorageConfig(base_path=settings.upload_dir))
    app.extensions["upload_service"] = UploadService(
        storage=storage,
        max_files=settings.max_files_per_upload,
    )
    app.extensions["upload_notifier"] = _build_notifier(settings, notifier)

    register_routes(app)

    register_error_handlers(app, debug=settings.debug)

    return app


def run() -> None:
    setup_logging(default_settings.log_level)
    app = create_app()
    logger.info(
        "Server is running at http://%s:%d", default_settings.host, default_settings.port
    )
    app.run(host=default_settings.host, port=default_settings.port, debug=default_settings.debug)


if __name__ == "__main__":
    run()
