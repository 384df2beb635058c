# upload_api/api/routes/__init__.py

from flask import Flask

from upload_api.api.routes.health_routes import bp_health
from upload_api.api.routes.upload_routes import bp_upload


def register_routes(app: Flask, *, prefix: str = "") -> None:
    # "/", "/ping" e "/health"
    app.register_blueprint(bp_health, url_prefix=prefix or None)

    app.register_blueprint(bp_upload, url_prefix=prefix or None)
