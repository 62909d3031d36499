from prompt_architect.inference.base import CompletionGateway
from prompt_architect.inference.chat_completions_client import (
    ChatCompletionsGateway,
    MalformedCompletionError,
    MissingCredentialError,
    extract_content,
)
from prompt_architect.inference.config import get_completion_gateway

__all__ = [
    "CompletionGateway",
    "ChatCompletionsGateway",
    "MalformedCompletionError",
    "MissingCredentialError",
    "extract_content",
    "get_completion_gateway",
]
