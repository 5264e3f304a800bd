# Chat orchestration: retrieve context for the latest user turn, fold it into
# the mode's system prompt, then ask the model client for a reply.

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence

from bizpilot.knowledge.prompts import format_retrieved_content
from bizpilot.knowledge.retriever import RagRetriever
from .modes import AssistantMode
from .types import ChatResponse, GenerationError, Message

logger = logging.getLogger(__name__)

CONTEXT_PREAMBLE = "Use the following retrieved information to enhance your response:"
FALLBACK_REPLY = "I apologize, but I couldn't generate a response. Please try again."
GENERATION_FAILED = "Failed to generate response. Please try again."
DEFAULT_TASK_RECOMMENDATION = (
    "Based on your business goals, consider prioritizing this task for optimal results."
)


class ChatGenerator:
    def __init__(self, model_client, retriever: Optional[RagRetriever] = None):
        self.model_client = model_client
        self.retriever = retriever

    def _retrieve_context(self, transcript: Sequence[Message], mode: AssistantMode) -> str:
        """
        Knowledge-base context for the latest user turn.
        A retrieval outage degrades the turn to an un-augmented answer; it
        never blocks the reply.
        """
        if not transcript or self.retriever is None:
            return ""
        last = transcript[-1]
        if last.role != "user":
            return ""
        try:
            fragments = self.retriever.retrieve(last.content, mode)
        except Exception as e:
            logger.warning("RAG retrieval failed, answering without context: %s", e)
            return ""
        return format_retrieved_content(fragments)

    def _compose_system_message(self, mode: AssistantMode, context: str) -> Message:
        parts = [mode.system_prompt]
        if context:
            parts += [CONTEXT_PREAMBLE, context]
        return Message(role="system", content="\n\n".join(parts))

    def build_messages(self, transcript: Sequence[Message], mode: AssistantMode, context: str) -> List[Message]:
        return [self._compose_system_message(mode, context), *transcript]

    def chat(self, transcript: Sequence[Message], mode: AssistantMode) -> ChatResponse:
        """Main entry point: one assistant reply for `transcript` (left untouched)."""
        mode = AssistantMode(mode)
        context = self._retrieve_context(transcript, mode)
        messages = self.build_messages(transcript, mode, context)

        try:
            text, meta = self.model_client.generate(messages, mode.params)
        except Exception as e:
            logger.error("Model call failed (mode=%s): %s", mode.value, e)
            raise GenerationError(GENERATION_FAILED) from e

        return ChatResponse(
            text=text or FALLBACK_REPLY,
            mode=mode.value,
            context_used=bool(context),
            meta=meta,
        )

    def respond(self, transcript: Sequence[Message], mode: AssistantMode) -> str:
        return self.chat(transcript, mode).text

    def recommend_task(self, title: str, deadline: date) -> str:
        """Short success-manager advice for a new task; a fixed line if the model fails."""
        prompt = (
            f"I have a task titled \"{title}\" due on {deadline.isoformat()}. "
            "Give me one short, actionable recommendation for completing it."
        )
        try:
            return self.respond([Message(role="user", content=prompt)], AssistantMode.SUCCESS_MANAGER)
        except GenerationError:
            return DEFAULT_TASK_RECOMMENDATION
