import logging
from dataclasses import dataclass, fields
from typing import Optional

from prompt_architect.errors import PromptValidationError
from prompt_architect.frameworks import FrameworkId
from prompt_architect.inference.base import CompletionGateway
from prompt_architect.prompts import (
    ComposedInstruction,
    InputMode,
    OutputFormat,
    StructuredPrompt,
    compose_instruction,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerationRequest:
    user_input: str
    format: OutputFormat = OutputFormat.MARKDOWN
    framework_id: FrameworkId = FrameworkId.STANDARD
    mode: InputMode = InputMode.SIMPLE
    structured: Optional[StructuredPrompt] = None

    def is_blank(self) -> bool:
        # A structured form counts as blank when all six fields are whitespace,
        # even though its labelled text ("Role: \nTask: ...") is not empty.
        if InputMode(self.mode) is InputMode.STRUCTURED:
            if self.structured is None:
                return True
            return not any(getattr(self.structured, f.name).strip() for f in fields(self.structured))
        return not (self.user_input or "").strip()


class PromptGenerator:
    """
    One generation attempt: validate, compose, call the gateway once.

    Validation failures never reach the gateway. Gateway failures propagate
    as CompletionGatewayError; an empty completion is returned as "".
    """

    def __init__(self, gateway: CompletionGateway):
        self.gateway = gateway

    def compose(self, request: GenerationRequest) -> ComposedInstruction:
        if request.is_blank():
            raise PromptValidationError()

        return compose_instruction(
            request.user_input,
            request.format,
            request.framework_id,
            mode=request.mode,
            structured=request.structured,
        )

    def generate(self, request: GenerationRequest) -> str:
        composed = self.compose(request)

        logger.info(
            "Generating prompt: framework=%s format=%s mode=%s",
            FrameworkId(request.framework_id).value,
            OutputFormat(request.format).value,
            InputMode(request.mode).value,
        )

        prompt = self.gateway.complete(composed.system_instruction, composed.user_content)
        if not prompt:
            logger.warning("Completion API returned an empty prompt")
        return prompt
