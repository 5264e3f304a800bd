# Client for the RAG service's /ingest endpoint.
# Every outcome, including transport failures, is mapped to an IngestResult
# so callers never have to catch anything.

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .types import DocumentType, IngestResult

logger = logging.getLogger(__name__)

MSG_INGESTED = "Document successfully ingested"
MSG_NO_CONNECTION = "Cannot connect to the server. Please check your internet connection and try again."
MSG_ACCESS_DENIED = "Access denied. Please check your credentials."
MSG_TOO_LARGE = "Document size exceeds the maximum limit."
MSG_FAILED = "Failed to process document. Please try again."
MSG_UNEXPECTED = "An unexpected error occurred. Please try again."

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def _as_id(value: Any) -> Optional[str]:
    """Server ids may arrive as numbers; keep them as strings."""
    return None if value is None else str(value)


def _json_or_none(resp: requests.Response) -> Optional[Dict[str, Any]]:
    try:
        data = resp.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


class IngestClient:
    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def ingest(self, document_url: str, document_type: DocumentType) -> IngestResult:
        """Submit one document reference for ingestion into the dataset bound to `document_type`."""
        try:
            return self._ingest(document_url, DocumentType(document_type))
        except Exception:
            logger.exception("Unexpected error while ingesting %s", document_url)
            return IngestResult(success=False, message=MSG_UNEXPECTED)

    def _ingest(self, document_url: str, document_type: DocumentType) -> IngestResult:
        dataset_id = document_type.dataset.value
        payload = {"files": [document_url], "datasetId": dataset_id}

        try:
            resp = requests.post(
                f"{self.base_url}/ingest",
                json=payload,
                headers=JSON_HEADERS,
                timeout=self.timeout,
            )
        except requests.ConnectionError as e:
            logger.error("RAG ingest unreachable: %s", e)
            return IngestResult(success=False, message=MSG_NO_CONNECTION)
        except requests.RequestException as e:
            logger.error("RAG ingest request failed: %s", e)
            return IngestResult(success=False, message=MSG_FAILED)

        data = _json_or_none(resp)
        if not resp.ok or data is None:
            logger.error("RAG ingest error: status=%s body=%r", resp.status_code, resp.text[:500])
            if resp.status_code == 403:
                return IngestResult(success=False, message=MSG_ACCESS_DENIED)
            if resp.status_code == 413:
                return IngestResult(success=False, message=MSG_TOO_LARGE)
            return IngestResult(success=False, message=(data or {}).get("message") or MSG_FAILED)

        logger.info("Ingested %s into %s (documentId=%s)", document_url, dataset_id, data.get("documentId"))
        return IngestResult(
            success=True,
            message=data.get("message") or MSG_INGESTED,
            document_id=_as_id(data.get("documentId")),
            ingested_files=data.get("ingestedFiles"),
            dataset_id=dataset_id,
        )
