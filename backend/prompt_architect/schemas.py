from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, List

from prompt_architect.frameworks import FrameworkId
from prompt_architect.prompts import InputMode, OutputFormat, StructuredPrompt


class StructuredPromptModel(BaseModel):
    """Labelled fields of the structured input form"""
    model_config = ConfigDict(extra="forbid")

    role: str = ""
    task: str = ""
    format: str = ""
    example: str = ""
    input: str = ""
    context: str = ""

    def to_domain(self) -> StructuredPrompt:
        return StructuredPrompt(**self.model_dump())


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_input: str = Field(alias="userInput")
    format: OutputFormat
    framework_id: FrameworkId = Field(alias="frameworkId")
    mode: InputMode = InputMode.SIMPLE
    structured: Optional[StructuredPromptModel] = None

    # Sent by older front-ends that pre-built the directives client side.
    # Accepted and ignored: the server always composes both directives itself.
    framework_instruction: Optional[str] = Field(None, alias="frameworkInstruction")
    format_instructions: Optional[Dict[str, str]] = Field(None, alias="formatInstructions")


class GenerateResponse(BaseModel):
    prompt: str


class ErrorDetail(BaseModel):
    loc: List[str]
    msg: str


class ErrorResponse(BaseModel):
    error: str
    details: List[ErrorDetail] = []


class FrameworkOption(BaseModel):
    id: FrameworkId
    name: str
    description: str
    fields: List[str] = []


class FormatOption(BaseModel):
    id: OutputFormat
    instruction: str
