# Client for the OpenAI Chat Completions API.
# One request, one full response; retries are left to the user.

from typing import Any, Dict, List, Optional, Tuple

from openai import OpenAI

from ..types import Message, ModelParams


class OpenAIClient:
    def __init__(self, model: str = "gpt-4", api_key: Optional[str] = None):
        self.model = model
        self.client = OpenAI(api_key=api_key, max_retries=0)

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[Optional[str], Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=formatted,
            temperature=params.temperature,
            max_tokens=params.max_tokens,
            presence_penalty=params.presence_penalty,
            frequency_penalty=params.frequency_penalty,
        )
        text = resp.choices[0].message.content if resp.choices else None
        meta = {"engine": "openai", "model": self.model}
        return text, meta
