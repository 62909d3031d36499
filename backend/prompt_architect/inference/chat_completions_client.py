import logging
from typing import Optional

import requests

from prompt_architect.errors import CompletionGatewayError
from prompt_architect.inference.base import CompletionGateway

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
TOP_P = 0.9


class MalformedCompletionError(ValueError):
    pass


class MissingCredentialError(RuntimeError):
    pass


class ChatCompletionsGateway(CompletionGateway):
    """
    OpenAI-compatible /chat/completions client.

    Exactly one POST per call: no retries, no caching. Every failure
    collapses into CompletionGatewayError; the cause is logged and chained.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: Optional[str],
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def complete(self, system_instruction: str, user_content: str) -> str:
        try:
            return self._complete(system_instruction, user_content)
        except (requests.RequestException, MalformedCompletionError, MissingCredentialError) as exc:
            logger.exception("Completion request to %s failed", self.base_url)
            raise CompletionGatewayError() from exc

    def _complete(self, system_instruction: str, user_content: str) -> str:
        if not self.api_key:
            raise MissingCredentialError("completion API key is not configured")

        response = self.session.post(
            f"{self.base_url}/chat/completions",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": user_content},
                ],
                "temperature": TEMPERATURE,
                "top_p": TOP_P,
                "stream": False,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedCompletionError("completion response is not JSON") from exc

        return extract_content(data)


def extract_content(data) -> str:
    """
    First choice's message text.

    An empty choices list, or a first choice without content, yields ""
    rather than an error. A body without a choices list (an error envelope,
    say) is malformed.
    """
    if not isinstance(data, dict):
        raise MalformedCompletionError(f"unexpected response type: {type(data).__name__}")

    if "choices" not in data:
        raise MalformedCompletionError("response has no 'choices'")
    choices = data["choices"]
    if not isinstance(choices, list):
        raise MalformedCompletionError("'choices' is not a list")
    if not choices:
        logger.warning("Completion response contained no choices")
        return ""

    first = choices[0]
    if not isinstance(first, dict):
        raise MalformedCompletionError("choice is not an object")

    message = first.get("message") or {}
    if not isinstance(message, dict):
        raise MalformedCompletionError("choice message is not an object")

    content = message.get("content")
    if content is None:
        return ""
    if not isinstance(content, str):
        raise MalformedCompletionError("message content is not a string")
    return content
