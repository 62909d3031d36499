import logging
from typing import List

from fastapi import APIRouter, Depends

from prompt_architect.frameworks import get_framework_registry
from prompt_architect.inference import CompletionGateway, get_completion_gateway
from prompt_architect.prompts import FORMAT_INSTRUCTIONS
from prompt_architect.schemas import (
    ErrorResponse,
    FormatOption,
    FrameworkOption,
    GenerateRequest,
    GenerateResponse,
)
from prompt_architect.service import GenerationRequest, PromptGenerator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="",
    tags=["generator"],
)


def to_generation_request(request: GenerateRequest) -> GenerationRequest:
    return GenerationRequest(
        user_input=request.user_input,
        format=request.format,
        framework_id=request.framework_id,
        mode=request.mode,
        structured=request.structured.to_domain() if request.structured else None,
    )


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        405: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def generate(
    request: GenerateRequest,
    gateway: CompletionGateway = Depends(get_completion_gateway),
):
    """
    Expand the user's idea into a structured prompt.

    Validation errors answer 422; any completion API failure answers 500
    with a generic message (see the exception handlers in main).
    """
    if request.framework_instruction or request.format_instructions:
        logger.debug("Ignoring client-supplied framework/format instructions")

    prompt = PromptGenerator(gateway).generate(to_generation_request(request))
    return GenerateResponse(prompt=prompt)


@router.get("/frameworks", response_model=List[FrameworkOption])
def list_frameworks():
    """List prompting frameworks in display order"""
    return [f.to_dict() for f in get_framework_registry().list_all()]


@router.get("/formats", response_model=List[FormatOption])
def list_formats():
    return [
        {"id": fmt.value, "instruction": instruction}
        for fmt, instruction in FORMAT_INSTRUCTIONS.items()
    ]


@router.get("/health")
def health():
    return {"status": "ok"}
