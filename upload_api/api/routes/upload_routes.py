# upload_api/api/routes/upload_routes.py

from __future__ import annotations

from flask import Blueprint, after_this_request, current_app, jsonify, request
from werkzeug.datastructures import FileStorage as WzFileStorage

from upload_api.api.schemas.upload_schema import UploadFilesResponse
from upload_api.core.interfaces.upload_notifier import UploadCompletedEvent, UploadNotifier
from upload_api.entities.upload import IncomingFile
from upload_api.services.upload_service import UploadService
from upload_api.services.upload_tree import build_tree, log_tree

bp_upload = Blueprint("upload", __name__)


# -------------------------
# Helpers
# -------------------------

def _selected(files: list[WzFileStorage]) -> list[WzFileStorage]:
    # input file sem seleção chega com filename vazio
    return [f for f in files if f is not None and f.filename]


def _get_upload_files() -> list[WzFileStorage]:
    files = _selected(request.files.getlist("files"))
    if files:
        return files
    return _selected(request.files.getlist("file"))[:1]


def _to_incoming(f: WzFileStorage) -> IncomingFile:
    return IncomingFile(
        declared_name=str(f.filename),
        content_type=f.mimetype,
        stream=f.stream,
    )


def _upload_service() -> UploadService:
    return current_app.extensions["upload_service"]


def _notifier() -> UploadNotifier | None:
    return current_app.extensions.get("upload_notifier")


# -------------------------
# Upload (lote de arquivos) + notificação
# -------------------------

@bp_upload.post("/upload")
def upload_files():
    parts = [_to_incoming(f) for f in _get_upload_files()]

    batch = _upload_service().receive(parts)
    log_tree(build_tree(batch))

    payload = UploadFilesResponse.from_batch(batch).model_dump(by_alias=True)

    notifier = _notifier()
    if notifier is not None:
        event = UploadCompletedEvent(
            files_uploaded=len(batch),
            file_names=tuple(f.declared_name for f in batch),
        )

        # resposta já montada: o notifier não altera status nem corpo
        @after_this_request
        def _notify(response):
            notifier.notify_upload_completed(event)
            return response

    return jsonify(payload), 200
