# Data models for the knowledge layer.
# What the RAG service returns, which dataset a request targets,
# and the tagged result of an ingestion attempt.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DatasetKey(str, Enum):
    """The two fixed partitions of the remote knowledge base."""
    DEFAULT = "default_dataset"
    PERSONA = "persona_ai"


class DocumentType(str, Enum):
    """Selector used when adding a document to the knowledge base."""
    GENERAL = "general"
    PERSONA = "persona"

    @property
    def dataset(self) -> DatasetKey:
        return DatasetKey.DEFAULT if self is DocumentType.GENERAL else DatasetKey.PERSONA


@dataclass(frozen=True)
class RetrievedFragment:
    """A text chunk returned by /retrieve, in relevance order."""
    chunk: str


@dataclass
class IngestResult:
    """Outcome of one /ingest call. Never raised, always returned."""
    success: bool
    message: str
    document_id: Optional[str] = None
    ingested_files: Optional[int] = None
    dataset_id: Optional[str] = None


class RetrievalError(Exception):
    """The RAG service could not return fragments for a query."""
