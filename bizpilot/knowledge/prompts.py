# Prompt fragments built from retrieved knowledge-base content.

from __future__ import annotations
from typing import Sequence

from .types import RetrievedFragment

CONTEXT_HEADING = "Relevant information from your knowledge base:"
CONTEXT_INSTRUCTION = "Please use this context to provide a more informed response."


def format_retrieved_content(fragments: Sequence[RetrievedFragment]) -> str:
    """Render fragments as a numbered block; empty input means no context section."""
    if not fragments:
        return ""
    entries = "\n".join(f"[{i}] {f.chunk}" for i, f in enumerate(fragments, start=1))
    return f"{CONTEXT_HEADING}\n\n{entries}\n\n{CONTEXT_INSTRUCTION}"
