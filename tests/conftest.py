import json

import pytest
from fastapi.testclient import TestClient

from consultants import config
from consultants.main import app

ADA = {
    "name": "Ada",
    "shortIntro": "Engineer",
    "profilePicture": "/img/ada.png",
    "projects": [
        {
            "name": "X",
            "shortDescription": "d",
            "backgroundImage": "/img/x.png",
            "link": "http://x",
        }
    ],
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    """Point the loader at a temp file; returns a writer for its contents."""
    path = tmp_path / "people.json"
    monkeypatch.setattr(config, "DATA_PATH", path)

    def write(people):
        text = people if isinstance(people, str) else json.dumps(people)
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def template_dir(tmp_path, monkeypatch):
    path = tmp_path / "templates"
    path.mkdir()
    monkeypatch.setattr(config, "TEMPLATE_DIR", path)
    return path


@pytest.fixture
def client():
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
