import pytest

from bizpilot.knowledge.validator import file_name_from_url, is_valid_document_url


@pytest.mark.parametrize(
    "url",
    [
        "s3://bucket/doc.xyz",
        "s3://bucket/no-extension",
        "s3://",
    ],
)
def test_s3_references_always_valid(url):
    assert is_valid_document_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/report.pdf",
        "http://example.com/files/Guide.DOCX",
        "https://example.com/a/b/notes.txt",
        "https://example.com/legacy.doc?download=1",
        "ftp://example.com/report.pdf",
        "file:///tmp/report.pdf",
    ],
)
def test_direct_file_links_valid(url):
    assert is_valid_document_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "https://drive.google.com/file/view?id=1",
        "https://drive.google.com/file/d/abc/view/report.pdf",
        "https://example.com/report.pdf.html",
        "https://example.com/",
        "https://example.com/image.png",
    ],
)
def test_non_direct_links_invalid(url):
    assert is_valid_document_url(url) is False


@pytest.mark.parametrize(
    "url",
    ["", "not a url", "report.pdf", "/local/report.pdf", "http://[::1/report.pdf", None, 42],
)
def test_malformed_input_invalid_without_raising(url):
    assert is_valid_document_url(url) is False


def test_file_name_from_url():
    assert file_name_from_url("s3://bucket/folder/plan.pdf") == "plan.pdf"
    assert file_name_from_url("https://example.com/docs/report.pdf?x=1") == "report.pdf"
    assert file_name_from_url("file:///tmp/report.pdf") == "report.pdf"
    assert file_name_from_url("not a url") == "not a url"
