"""Settings resolution and startup failures."""
import os

import pytest

from qaboard import cli
from qaboard.container import build_store
from qaboard.core.config import ConfigError, Settings, load_settings
from qaboard.persistence.stores.fallback_store import FallbackDocumentStore
from qaboard.persistence.stores.local_store import LocalDocumentStore


def test_bucket_selects_s3():
    settings = load_settings({"BUCKET": "forum", "AWS_DEFAULT_REGION": "ap-southeast-1", "STORAGE_PREFIX": "/dev/"})
    assert settings.storage_mode == "s3"
    assert settings.region == "ap-southeast-1"
    assert settings.storage_prefix == "dev"
    assert settings.port == 8080


def test_data_dir_selects_local(tmp_path):
    settings = load_settings({"DATA_DIR": str(tmp_path), "PORT": "9000", "REQUIRE_AUTH": "yes"})
    assert settings.storage_mode == "local"
    assert settings.port == 9000
    assert settings.require_auth is True
    assert isinstance(build_store(settings), LocalDocumentStore)


def test_fallback_needs_both_targets(tmp_path):
    with pytest.raises(ConfigError):
        load_settings({"STORAGE_MODE": "fallback", "BUCKET": "forum"})
    settings = load_settings({"STORAGE_MODE": "fallback", "BUCKET": "forum", "DATA_DIR": str(tmp_path)})
    assert settings.storage_mode == "fallback"


def test_fallback_store_wiring(tmp_path):
    settings = Settings(storage_mode="fallback", bucket="forum", data_dir=str(tmp_path))
    store = build_store(settings)
    assert isinstance(store, FallbackDocumentStore)
    assert store.describe() == f"s3://forum -> local:{tmp_path}"


@pytest.mark.parametrize("environ", [
    {},
    {"STORAGE_MODE": "s3"},
    {"STORAGE_MODE": "local"},
    {"STORAGE_MODE": "ftp", "BUCKET": "forum"},
    {"BUCKET": "forum", "PORT": "eighty"},
])
def test_misconfiguration_is_fatal(environ):
    with pytest.raises(ConfigError):
        load_settings(environ)


def _clear_env(monkeypatch):
    for name in ("BUCKET", "DATA_DIR", "STORAGE_MODE", "WEB_ROOT", "REQUIRE_AUTH", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(cli, "load_settings", lambda: load_settings(dict(os.environ)))


def test_cli_exits_nonzero_without_storage(monkeypatch):
    _clear_env(monkeypatch)
    assert cli.main(["serve"]) == 1


def test_cli_init_store(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert cli.main(["init-store"]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["answers.json", "questions.json", "users.json"]
