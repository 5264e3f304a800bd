# Knowledge layer: validate references, ingest them, retrieve context.

from .ingest import IngestClient
from .prompts import format_retrieved_content
from .retriever import RagRetriever
from .types import DatasetKey, DocumentType, IngestResult, RetrievedFragment, RetrievalError
from .validator import file_name_from_url, is_valid_document_url

__all__ = [
    "IngestClient",
    "RagRetriever",
    "format_retrieved_content",
    "is_valid_document_url",
    "file_name_from_url",
    "DatasetKey",
    "DocumentType",
    "IngestResult",
    "RetrievedFragment",
    "RetrievalError",
]
