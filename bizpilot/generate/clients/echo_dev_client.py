# Offline model client: answers by echoing the latest user turn.
# Used when no OpenAI key is configured, and in tests.

from typing import Any, Dict, List, Tuple

from bizpilot.knowledge.prompts import CONTEXT_HEADING
from ..types import Message, ModelParams


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        last_user = next((m.content for m in reversed(messages) if m.role == "user"), None)
        system = messages[0].content if messages and messages[0].role == "system" else ""
        tag = "[ECHO +context]" if CONTEXT_HEADING in system else "[ECHO]"
        text = f"{tag} {last_user or '(no user input)'}"
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta
