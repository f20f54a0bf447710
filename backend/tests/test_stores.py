"""Document store behaviour: local files, S3 (stubbed), and primary/secondary fallback."""
import io
import json

import botocore.session
import pytest
from botocore.response import StreamingBody
from botocore.stub import Stubber

from qaboard.persistence.interfaces.document_store import DocumentStore, StorageError
from qaboard.persistence.seed import init_store
from qaboard.persistence.stores.fallback_store import FallbackDocumentStore
from qaboard.persistence.stores.local_store import LocalDocumentStore
from qaboard.persistence.stores.s3_store import S3DocumentStore


# ------------------------------------------------------------------
# Local
# ------------------------------------------------------------------
def test_local_missing_key_is_empty(tmp_path):
    store = LocalDocumentStore(str(tmp_path / "nowhere"))
    doc = store.get("questions.json")
    assert doc.data == []
    assert doc.served_by == "local"
    assert store.exists("questions.json") is False


def test_local_put_overwrites(tmp_path):
    store = LocalDocumentStore(str(tmp_path / "data"))
    assert store.put("answers.json", [{"answerId": "a-1"}]) == "local"
    store.put("answers.json", [{"answerId": "a-2"}])
    assert store.get("answers.json").data == [{"answerId": "a-2"}]
    assert json.loads((tmp_path / "data" / "answers.json").read_text()) == [{"answerId": "a-2"}]
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["answers.json"]


def test_local_empty_file_is_empty_collection(tmp_path):
    (tmp_path / "questions.json").write_text("  \n")
    assert LocalDocumentStore(str(tmp_path)).get("questions.json").data == []


def test_local_corrupt_file_is_storage_error(tmp_path):
    (tmp_path / "questions.json").write_text("[{oops")
    with pytest.raises(StorageError):
        LocalDocumentStore(str(tmp_path)).get("questions.json")


def test_local_rejects_keys_outside_directory(tmp_path):
    store = LocalDocumentStore(str(tmp_path / "data"))
    with pytest.raises(StorageError):
        store.get("../secrets.json")


# ------------------------------------------------------------------
# S3
# ------------------------------------------------------------------
@pytest.fixture
def s3_client():
    session = botocore.session.get_session()
    return session.create_client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def _body(raw: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(raw), len(raw))


def test_s3_get_reads_prefixed_key(s3_client):
    store = S3DocumentStore("forum-bucket", prefix="dev/", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_response(
            "get_object",
            {"Body": _body(b'[{"questionId":"q-1"}]')},
            {"Bucket": "forum-bucket", "Key": "dev/questions.json"},
        )
        doc = store.get("questions.json")
    assert doc.data == [{"questionId": "q-1"}]
    assert doc.served_by == "s3"
    assert store.describe() == "s3://forum-bucket/dev"


def test_s3_missing_key_is_empty(s3_client):
    store = S3DocumentStore("forum-bucket", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_client_error("get_object", service_error_code="NoSuchKey", http_status_code=404)
        assert store.get("answers.json").data == []


def test_s3_other_errors_raise(s3_client):
    store = S3DocumentStore("forum-bucket", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_client_error("get_object", service_error_code="AccessDenied", http_status_code=403)
        with pytest.raises(StorageError):
            store.get("answers.json")


def test_s3_put_writes_compact_json(s3_client):
    store = S3DocumentStore("forum-bucket", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_response(
            "put_object",
            {},
            {
                "Bucket": "forum-bucket",
                "Key": "users.json",
                "Body": b'[{"username":"alice"}]',
                "ContentType": "application/json",
            },
        )
        assert store.put("users.json", [{"username": "alice"}]) == "s3"
        stub.assert_no_pending_responses()


def test_s3_exists(s3_client):
    store = S3DocumentStore("forum-bucket", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_response("head_object", {}, {"Bucket": "forum-bucket", "Key": "questions.json"})
        stub.add_client_error("head_object", service_error_code="404", http_status_code=404)
        assert store.exists("questions.json") is True
        assert store.exists("questions.json") is False


# ------------------------------------------------------------------
# Fallback
# ------------------------------------------------------------------
class FlakyStore(DocumentStore):
    name = "s3"

    def __init__(self, up=True):
        self.up = up
        self.docs = {}

    def _check(self, key):
        if not self.up:
            raise StorageError(key, "connection refused")

    def get(self, key):
        from qaboard.persistence.interfaces.document_store import Document
        self._check(key)
        return Document(key=key, data=self.docs.get(key, []), served_by=self.name)

    def put(self, key, data):
        self._check(key)
        self.docs[key] = data
        return self.name

    def exists(self, key):
        self._check(key)
        return key in self.docs

    def describe(self):
        return "s3://flaky"


def test_fallback_prefers_primary(tmp_path):
    primary = FlakyStore()
    store = FallbackDocumentStore(primary, LocalDocumentStore(str(tmp_path)))
    assert store.put("questions.json", [1]) == "s3"
    assert store.get("questions.json").served_by == "s3"
    assert not (tmp_path / "questions.json").exists()


def test_fallback_uses_secondary_when_primary_fails(tmp_path, caplog):
    primary = FlakyStore(up=False)
    store = FallbackDocumentStore(primary, LocalDocumentStore(str(tmp_path)))
    assert store.put("questions.json", [1]) == "local"
    doc = store.get("questions.json")
    assert doc.data == [1]
    assert doc.served_by == "local"
    assert "falling back to local:" in caplog.text


def test_fallback_secondary_failure_propagates(tmp_path):
    store = FallbackDocumentStore(FlakyStore(up=False), FlakyStore(up=False))
    with pytest.raises(StorageError):
        store.get("questions.json")


# ------------------------------------------------------------------
# Seeding
# ------------------------------------------------------------------
def test_init_store_creates_only_missing(tmp_path):
    store = LocalDocumentStore(str(tmp_path))
    store.put("questions.json", [{"questionId": "q-1"}])

    outcome = init_store(store)
    assert outcome == {"questions.json": "skipped", "answers.json": "created", "users.json": "created"}
    assert store.get("questions.json").data == [{"questionId": "q-1"}]

    outcome = init_store(store, force=True)
    assert set(outcome.values()) == {"reset"}
    assert store.get("questions.json").data == []


def test_s3_invalid_utf8_is_storage_error(s3_client):
    store = S3DocumentStore("forum-bucket", client=s3_client)
    with Stubber(s3_client) as stub:
        stub.add_response("get_object", {"Body": _body(b"\xff\xfe[]")}, {"Bucket": "forum-bucket", "Key": "questions.json"})
        with pytest.raises(StorageError):
            store.get("questions.json")


def test_fallback_on_undecodable_primary_document(s3_client, tmp_path):
    secondary = LocalDocumentStore(str(tmp_path))
    secondary.put("questions.json", [{"questionId": "q-local"}])
    store = FallbackDocumentStore(S3DocumentStore("forum-bucket", client=s3_client), secondary)
    with Stubber(s3_client) as stub:
        stub.add_response("get_object", {"Body": _body(b"\xff\xfe[]")}, {"Bucket": "forum-bucket", "Key": "questions.json"})
        doc = store.get("questions.json")
    assert doc.served_by == "local"
    assert doc.data == [{"questionId": "q-local"}]


def test_local_failed_write_leaves_no_temp_file(tmp_path, monkeypatch):
    from qaboard.persistence.stores import local_store

    def failing_replace(src, dst):
        raise OSError("disk full")

    store = LocalDocumentStore(str(tmp_path))
    monkeypatch.setattr(local_store.os, "replace", failing_replace)
    with pytest.raises(StorageError):
        store.put("questions.json", [1])
    assert list(tmp_path.iterdir()) == []
