"""
Generation Session

Headless model of the prompt form: input mode, selected format and
framework, the structured fields, and the loading / error / result slots.
Each generate() bumps ``generation_id``; a result that arrives for an
older id is dropped, so the most recently started attempt owns the slots.
"""

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional

from prompt_architect.errors import CompletionGatewayError, PromptValidationError
from prompt_architect.frameworks import FrameworkId, get_framework_registry
from prompt_architect.prompts import InputMode, OutputFormat, StructuredPrompt
from prompt_architect.service import GenerationRequest, PromptGenerator

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate prompt. Please check the console for details."


class GenerationStatus(Enum):
    IDLE = "idle"
    COMPOSING = "composing"
    AWAITING_RESPONSE = "awaiting_response"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class GenerationSession:
    generator: PromptGenerator
    mode: InputMode = InputMode.SIMPLE
    output_format: OutputFormat = OutputFormat.MARKDOWN
    framework_id: FrameworkId = FrameworkId.STANDARD
    simple_prompt: str = ""
    structured: StructuredPrompt = field(default_factory=StructuredPrompt)

    generated_prompt: str = ""
    error: Optional[str] = None
    status: GenerationStatus = GenerationStatus.IDLE
    generation_id: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status in (GenerationStatus.COMPOSING, GenerationStatus.AWAITING_RESPONSE)

    @property
    def selected_framework_description(self) -> str:
        return get_framework_registry().get(self.framework_id).description

    def update_structured(self, name: str, value: str) -> None:
        if name not in {f.name for f in fields(StructuredPrompt)}:
            raise KeyError(name)
        setattr(self.structured, name, value)

    def build_request(self) -> GenerationRequest:
        return GenerationRequest(
            user_input=self.simple_prompt,
            format=self.output_format,
            framework_id=self.framework_id,
            mode=self.mode,
            structured=StructuredPrompt(**vars(self.structured)),
        )

    # ----------------------------
    # Attempt lifecycle
    # ----------------------------

    def begin(self) -> int:
        """Start a new attempt and return its generation id."""
        self.generation_id += 1
        self.error = None
        self.generated_prompt = ""
        self.status = GenerationStatus.COMPOSING
        return self.generation_id

    def is_current(self, generation_id: int) -> bool:
        return generation_id == self.generation_id

    def succeed(self, generation_id: int, prompt: str) -> bool:
        if not self.is_current(generation_id):
            logger.debug("Dropping late result for generation %s", generation_id)
            return False
        self.generated_prompt = prompt
        self.status = GenerationStatus.SUCCEEDED
        return True

    def fail(self, generation_id: int, message: str) -> bool:
        if not self.is_current(generation_id):
            logger.debug("Dropping late failure for generation %s", generation_id)
            return False
        self.error = message
        self.status = GenerationStatus.FAILED
        return True

    def generate(self) -> Optional[str]:
        """
        Run one attempt end to end. Returns the prompt, or None when the
        attempt failed or was superseded while awaiting the response.
        """
        generation_id = self.begin()
        request = self.build_request()

        self.status = GenerationStatus.AWAITING_RESPONSE
        try:
            prompt = self.generator.generate(request)
        except PromptValidationError as exc:
            self.fail(generation_id, exc.message)
            return None
        except CompletionGatewayError:
            self.fail(generation_id, GENERATION_FAILED_MESSAGE)
            return None
        except Exception:
            logger.exception("Generation %s failed unexpectedly", generation_id)
            self.fail(generation_id, GENERATION_FAILED_MESSAGE)
            return None

        return prompt if self.succeed(generation_id, prompt) else None
