# Decide whether a user-supplied document reference can be ingested.
# Pure helpers: no I/O, never raise.

from __future__ import annotations
from urllib.parse import urlsplit

S3_PREFIX = "s3://"
ALLOWED_FILE_EXTENSIONS = (".pdf", ".docx", ".doc", ".txt")

# host fragment -> path fragment marking a preview page rather than a file
PREVIEW_LINKS = {
    "drive.google.com": "view",
}


def _is_preview_link(host: str, path: str) -> bool:
    return any(h in host and p in path for h, p in PREVIEW_LINKS.items())


def is_valid_document_url(url: str) -> bool:
    """
    True when `url` points directly at a PDF/DOCX/DOC/TXT file.
    - s3:// references are accepted as-is (the RAG service resolves them).
    - any other URL must end in an allowed extension and must not be a
      cloud-drive preview page.
    """
    if not isinstance(url, str):
        return False
    if url.startswith(S3_PREFIX):
        return True

    try:
        parts = urlsplit(url.strip())
        host = (parts.hostname or "").lower()
    except ValueError:
        return False
    # no scheme: not a URL at all (bare path or free text)
    if not parts.scheme:
        return False

    path = parts.path.lower()
    if not path.endswith(ALLOWED_FILE_EXTENSIONS):
        return False
    return not _is_preview_link(host, path)


def file_name_from_url(url: str) -> str:
    """Last path segment of a reference; the raw string if it cannot be parsed."""
    if url.startswith(S3_PREFIX):
        return url[len(S3_PREFIX):].split("/")[-1]
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.scheme:
        return url
    return parts.path.split("/")[-1]
