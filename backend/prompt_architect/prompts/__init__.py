# backend/prompt_architect/prompts/__init__.py
"""
Instruction Composer

Builds the system instruction and user content sent to the completion API
from the selected framework, output format and user input.
"""

from prompt_architect.prompts.composer import (
    STANDARD_DIRECTIVE,
    ComposedInstruction,
    InputMode,
    StructuredPrompt,
    build_system_instruction,
    build_user_content,
    compose_instruction,
    framework_directive,
)
from prompt_architect.prompts.formats import (
    FORMAT_INSTRUCTIONS,
    OutputFormat,
    format_directive,
)

__all__ = [
    "STANDARD_DIRECTIVE",
    "ComposedInstruction",
    "InputMode",
    "StructuredPrompt",
    "build_system_instruction",
    "build_user_content",
    "compose_instruction",
    "framework_directive",
    "FORMAT_INSTRUCTIONS",
    "OutputFormat",
    "format_directive",
]
