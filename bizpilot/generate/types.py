# Simple, typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ModelParams:
    """Sampling parameters for one completion request."""
    temperature: float
    max_tokens: int = 1000
    presence_penalty: float = 0.6
    frequency_penalty: float = 0.3


@dataclass
class ChatResponse:
    """Reply produced for one chat turn."""
    text: str
    mode: str
    context_used: bool
    meta: Optional[Dict[str, Any]] = None


class GenerationError(Exception):
    """The language model call failed; the turn has no reply."""
