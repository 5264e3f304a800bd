# The two assistant modes and everything bound to them.
# A mode fixes the system prompt, the dataset retrieval reads from and the
# sampling parameters, so none of these can be mixed independently.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from bizpilot.knowledge.types import DatasetKey
from .types import ModelParams


@dataclass(frozen=True)
class ModeProfile:
    title: str
    description: str
    welcome_message: str
    system_prompt: str
    dataset: DatasetKey
    params: ModelParams


SUCCESS_MANAGER_PROMPT = """\
You are an AI Business Success Manager providing expert advice on business success strategies.
Your role is to:
- Analyze business situations and provide strategic insights
- Offer actionable recommendations based on industry best practices
- Help optimize operations and improve efficiency
- Guide decision-making with data-driven insights
- Maintain a professional, strategic perspective"""

PERSONA_PROMPT = """\
You are an AI simulation of a perfect customer avatar from the user's target market.
Your role is to:
- Think and respond exactly as a real customer would
- Share authentic perspectives on products and services
- Express genuine customer needs, desires, and pain points
- Provide feedback that reflects real market sentiment
- Maintain a natural, conversational tone"""

_PROFILES = {
    "success_manager": ModeProfile(
        title="Success Manager",
        description="Strategic business advice and insights",
        welcome_message=(
            "Hello! I'm your AI Business Success Manager. I can help you optimize your business "
            "strategy and operations using insights from your knowledge base. "
            "How can I assist you today?"
        ),
        system_prompt=SUCCESS_MANAGER_PROMPT,
        dataset=DatasetKey.DEFAULT,
        params=ModelParams(temperature=0.7),
    ),
    "persona": ModeProfile(
        title="Advanced AI Persona",
        description="Simulated customer interactions",
        welcome_message=(
            "Hi! I'm your AI Customer Persona. I'll help you understand your target market better "
            "by responding as your ideal customer would. What would you like to discuss?"
        ),
        system_prompt=PERSONA_PROMPT,
        dataset=DatasetKey.PERSONA,
        params=ModelParams(temperature=0.9),
    ),
}


class AssistantMode(str, Enum):
    SUCCESS_MANAGER = "success_manager"
    PERSONA = "persona"

    @property
    def profile(self) -> ModeProfile:
        return _PROFILES[self.value]

    @property
    def dataset(self) -> DatasetKey:
        return self.profile.dataset

    @property
    def system_prompt(self) -> str:
        return self.profile.system_prompt

    @property
    def params(self) -> ModelParams:
        return self.profile.params
