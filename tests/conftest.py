import io

import pytest

from upload_api.config.settings import Settings
from upload_api.main import create_app


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    return Settings(upload_dir=str(upload_dir), notifier_url=None)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def make_part(name: str, content: bytes = b"data", content_type: str = "text/plain"):
    return (io.BytesIO(content), name, content_type)
