from enum import Enum
from typing import Dict


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    JSON = "json"
    XML = "xml"
    TEXT = "text"


# Literal output contracts. Front-ends compare against these strings, keep them byte-stable.
FORMAT_INSTRUCTIONS: Dict[OutputFormat, str] = {
    OutputFormat.TEXT: (
        "The generated prompt must be in plain text format. "
        "The output must be ONLY the plain text prompt, without any surrounding text or explanatory phrases."
    ),
    OutputFormat.MARKDOWN: (
        "The generated prompt MUST be valid Markdown. "
        "Use Markdown syntax for structure and clarity: use '#', '##' for headings, "
        "'*' or '-' for bullet points, and '**' for bolding key terms. "
        "The final output must be ONLY the raw Markdown content. "
        "Do NOT wrap the output in a markdown code block (```)."
    ),
    OutputFormat.JSON: (
        "The generated prompt MUST be a valid JSON object. "
        "The final output must be ONLY the raw JSON string. "
        "Do not wrap it in markdown code blocks like ```json ... ```. "
        "The top-level key MUST be descriptive and based on the user's request (e.g., 'socialMediaCalendar'). "
        "It must be a valid JSON object that can be parsed directly."
    ),
    OutputFormat.XML: (
        "The generated prompt MUST be valid XML. "
        "The final output must be ONLY the raw XML string. "
        "Do not wrap it in markdown code blocks like ```xml ... ```. "
        "The root element MUST be descriptive and based on the user's request (e.g., '<recipeRequest>'). "
        "Do not include any text before the opening XML tag."
    ),
}


def format_directive(fmt) -> str:
    """Contract text for one output format. Unknown formats raise ValueError."""
    return FORMAT_INSTRUCTIONS[OutputFormat(fmt)]
