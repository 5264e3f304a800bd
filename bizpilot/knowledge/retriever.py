# Client for the RAG service's /retrieve endpoint.
# Fragments come back exactly as the service ranked them: no local
# re-ranking, filtering or dedup.

from __future__ import annotations

import logging
from typing import List, TYPE_CHECKING

import requests

from .types import RetrievedFragment, RetrievalError

if TYPE_CHECKING:
    from bizpilot.generate.modes import AssistantMode

logger = logging.getLogger(__name__)


def _chunk_text(result: dict) -> str:
    chunk = result["chunk"]
    if not isinstance(chunk, str):
        raise TypeError(f"chunk must be a string, got {type(chunk).__name__}")
    return chunk


class RagRetriever:
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def retrieve(self, query: str, mode: "AssistantMode") -> List[RetrievedFragment]:
        """
        Fetch fragments relevant to `query` from the dataset bound to `mode`.
        Raises RetrievalError on any transport, status or body problem.
        A body without `results` counts as zero fragments.
        """
        payload = {"prompt": query, "datasetId": mode.dataset.value}
        try:
            resp = requests.post(f"{self.base_url}/retrieve", json=payload)
            resp.raise_for_status()
            data = resp.json()
            results = data.get("results") or []
            fragments = [RetrievedFragment(chunk=_chunk_text(r)) for r in results]
        except (requests.RequestException, ValueError, AttributeError, KeyError, TypeError) as e:
            logger.error("RAG retrieval error (dataset=%s): %s", mode.dataset.value, e)
            raise RetrievalError("Failed to retrieve relevant content") from e

        logger.debug("Retrieved %d fragments from %s", len(fragments), mode.dataset.value)
        return fragments
