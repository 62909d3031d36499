from functools import lru_cache

from prompt_architect import config
from .chat_completions_client import ChatCompletionsGateway


# One gateway, and so one pooled requests.Session, per process
@lru_cache(maxsize=None)
def get_completion_gateway():
    return ChatCompletionsGateway(
        base_url=config.COMPLETION_BASE_URL,
        model=config.COMPLETION_MODEL,
        api_key=config.GROQ_API_KEY,
        timeout=config.COMPLETION_TIMEOUT,
    )
