import requests

from bizpilot.knowledge import ingest as ingest_mod
from bizpilot.knowledge.ingest import IngestClient
from bizpilot.knowledge.types import DocumentType

from conftest import FakeResponse

URL = "https://example.com/report.pdf"


def make_client():
    return IngestClient(base_url="https://rag.test/", timeout=30)


def test_success_maps_server_fields(fake_post):
    fake_post.response = FakeResponse(200, {"message": "queued", "documentId": "doc-7", "ingestedFiles": 1})
    res = make_client().ingest(URL, DocumentType.PERSONA)

    assert res.success is True
    assert res.message == "queued"
    assert res.document_id == "doc-7"
    assert res.ingested_files == 1
    assert res.dataset_id == "persona_ai"

    url, kwargs = fake_post.calls[0]
    assert url == "https://rag.test/ingest"
    assert kwargs["json"] == {"files": [URL], "datasetId": "persona_ai"}
    assert kwargs["timeout"] == 30


def test_success_default_message_and_general_dataset(fake_post):
    fake_post.response = FakeResponse(200, {})
    res = make_client().ingest(URL, "general")
    assert res.success is True
    assert res.message == ingest_mod.MSG_INGESTED
    assert res.dataset_id == "default_dataset"


def test_connection_error(fake_post):
    fake_post.error = requests.ConnectionError("refused")
    res = make_client().ingest(URL, DocumentType.GENERAL)
    assert res.success is False
    assert res.message == ingest_mod.MSG_NO_CONNECTION


def test_403_uses_fixed_message_not_server_body(fake_post):
    fake_post.response = FakeResponse(403, {"message": "bucket policy says no"}, text="forbidden")
    res = make_client().ingest(URL, DocumentType.GENERAL)
    assert res.success is False
    assert res.message == ingest_mod.MSG_ACCESS_DENIED


def test_413(fake_post):
    fake_post.response = FakeResponse(413, text="too big")
    res = make_client().ingest(URL, DocumentType.GENERAL)
    assert res.message == ingest_mod.MSG_TOO_LARGE


def test_other_error_prefers_server_message(fake_post):
    fake_post.response = FakeResponse(500, {"message": "Unsupported file"})
    assert make_client().ingest(URL, DocumentType.GENERAL).message == "Unsupported file"


def test_other_error_falls_back_to_generic(fake_post):
    fake_post.response = FakeResponse(502, text="<html>bad gateway</html>")
    res = make_client().ingest(URL, DocumentType.GENERAL)
    assert res.success is False
    assert res.message == ingest_mod.MSG_FAILED


def test_malformed_success_body_is_failure(fake_post):
    fake_post.response = FakeResponse(200, text="ok")
    res = make_client().ingest(URL, DocumentType.GENERAL)
    assert res.success is False
    assert res.message == ingest_mod.MSG_FAILED


def test_unknown_selector_never_raises(fake_post):
    res = make_client().ingest(URL, "archive")
    assert res.success is False
    assert res.message == ingest_mod.MSG_UNEXPECTED
    assert fake_post.calls == []


def test_no_retry_on_failure(fake_post):
    fake_post.response = FakeResponse(500, {})
    make_client().ingest(URL, DocumentType.GENERAL)
    assert len(fake_post.calls) == 1


def test_numeric_document_id_becomes_string(fake_post):
    fake_post.response = FakeResponse(200, {"documentId": 12345, "ingestedFiles": 1})
    res = make_client().ingest(URL, DocumentType.GENERAL)
    assert res.success is True
    assert res.document_id == "12345"
