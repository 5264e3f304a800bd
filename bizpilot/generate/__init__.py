# Generator package
# Exposes the chat orchestrator, modes and shared message types.

from .generator import ChatGenerator
from .modes import AssistantMode
from .types import ChatResponse, GenerationError, Message, ModelParams
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ChatGenerator",
    "AssistantMode",
    "ChatResponse",
    "GenerationError",
    "Message",
    "ModelParams",
    "EchoDevClient",
]
