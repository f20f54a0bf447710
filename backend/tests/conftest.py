import json

import pytest
from fastapi.testclient import TestClient

from qaboard.core.config import Settings
from qaboard.main import create_app
from qaboard.persistence.stores.local_store import LocalDocumentStore


def read_doc(data_dir, key):
    path = data_dir / key
    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))


def write_doc(data_dir, key, data):
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / key).write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def make_client(data_dir):
    """Build a TestClient over a local store; keyword args override Settings fields."""
    def _make(store=None, **overrides):
        fields = {"storage_mode": "local", "data_dir": str(data_dir)}
        fields.update(overrides)
        settings = Settings(**fields)
        app = create_app(settings, store=store or LocalDocumentStore(str(data_dir)))
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client):
    return make_client()
