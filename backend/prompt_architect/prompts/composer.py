from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional

from prompt_architect.frameworks import FrameworkId, get_framework_registry
from prompt_architect.prompts.formats import format_directive
from prompt_architect.prompts.fragments import (
    CLOSING_REMINDER,
    CORE_HEADER,
    HYGIENE_HEADER,
    HYGIENE_INTRO,
    HYGIENE_RULES,
    IDENTITY_FRAMING,
    SECTION_SEPARATOR,
    core_directives,
    numbered,
)


STANDARD_DIRECTIVE = "You will generate a standard, high-quality prompt based on the user input."


class InputMode(str, Enum):
    SIMPLE = "simple"
    STRUCTURED = "structured"


@dataclass
class StructuredPrompt:
    """Six labelled fields of the structured input form, in submission order."""
    role: str = ""
    task: str = ""
    format: str = ""
    example: str = ""
    input: str = ""
    context: str = ""

    def labelled_lines(self) -> str:
        return "\n".join(
            f"{f.name.capitalize()}: {getattr(self, f.name)}" for f in fields(self)
        ).strip()


@dataclass(frozen=True)
class ComposedInstruction:
    system_instruction: str
    user_content: str


def framework_directive(framework_id) -> str:
    framework = get_framework_registry().get(framework_id)
    if framework.id is FrameworkId.STANDARD:
        return STANDARD_DIRECTIVE
    return (
        f"You MUST structure the generated prompt according to the \"{framework.name}\" framework. "
        "Ensure the final prompt has clear sections corresponding to this framework."
    )


def build_system_instruction(framework_id, fmt) -> str:
    hygiene = "\n".join([HYGIENE_HEADER, HYGIENE_INTRO, numbered(HYGIENE_RULES)])
    core = "\n".join([
        CORE_HEADER,
        numbered(core_directives(framework_directive(framework_id), format_directive(fmt))),
    ])
    return "\n".join([
        IDENTITY_FRAMING,
        SECTION_SEPARATOR,
        hygiene,
        SECTION_SEPARATOR,
        core,
        CLOSING_REMINDER,
    ])


def build_user_content(
    user_input: str,
    mode=InputMode.SIMPLE,
    structured: Optional[StructuredPrompt] = None,
) -> str:
    """
    Simple mode sends the trimmed free text.
    Structured mode sends the six labelled fields, one per line, ignoring user_input.
    """
    if InputMode(mode) is InputMode.STRUCTURED:
        return (structured or StructuredPrompt()).labelled_lines()
    return (user_input or "").strip()


def compose_instruction(
    user_input: str,
    fmt,
    framework_id,
    mode=InputMode.SIMPLE,
    structured: Optional[StructuredPrompt] = None,
) -> ComposedInstruction:
    """
    Pure, deterministic assembly of the two messages sent to the completion API.
    Unknown framework ids or formats raise ValueError.
    """
    return ComposedInstruction(
        system_instruction=build_system_instruction(framework_id, fmt),
        user_content=build_user_content(user_input, mode, structured),
    )
