import pytest

from prompt_architect.frameworks import FRAMEWORK_CATALOG, FrameworkId
from prompt_architect.prompts import (
    FORMAT_INSTRUCTIONS,
    STANDARD_DIRECTIVE,
    InputMode,
    OutputFormat,
    StructuredPrompt,
    build_user_content,
    compose_instruction,
    framework_directive,
    format_directive,
)
from prompt_architect.prompts import fragments


ALL_FRAMEWORKS = list(FrameworkId)
ALL_FORMATS = list(OutputFormat)


@pytest.mark.parametrize("framework_id", ALL_FRAMEWORKS)
@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_composition_is_deterministic(framework_id, fmt):
    first = compose_instruction("an idea", fmt, framework_id)
    second = compose_instruction("an idea", fmt, framework_id)
    assert first == second
    assert first.system_instruction == second.system_instruction


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_exactly_one_format_contract(fmt):
    instruction = compose_instruction("x", fmt, FrameworkId.RACE).system_instruction
    for other, contract in FORMAT_INSTRUCTIONS.items():
        expected = 1 if other is fmt else 0
        assert instruction.count(contract) == expected


@pytest.mark.parametrize("framework_id", ALL_FRAMEWORKS)
def test_exactly_one_framework_directive(framework_id):
    instruction = compose_instruction("x", OutputFormat.TEXT, framework_id).system_instruction
    assert instruction.count("**ADHERE TO FRAMEWORK:**") == 1
    assert instruction.count("**ADHERE TO FORMAT:**") == 1
    assert framework_directive(framework_id) in instruction


def test_standard_uses_generic_directive_and_names_no_framework():
    instruction = compose_instruction("x", OutputFormat.MARKDOWN, "standard").system_instruction
    assert STANDARD_DIRECTIVE in instruction
    for framework in FRAMEWORK_CATALOG:
        assert framework.name not in instruction
    assert "You MUST structure the generated prompt according to" not in instruction


@pytest.mark.parametrize(
    "framework", [f for f in FRAMEWORK_CATALOG if f.id is not FrameworkId.STANDARD]
)
def test_named_frameworks_appear_verbatim(framework):
    instruction = compose_instruction("x", OutputFormat.JSON, framework.id).system_instruction
    assert f"\"{framework.name}\" framework" in instruction
    assert STANDARD_DIRECTIVE not in instruction


def test_race_directive_names_its_sections():
    instruction = compose_instruction("x", "markdown", "race").system_instruction
    assert "Race [Role, Action, Context, Explanation]" in instruction
    assert "Ensure the final prompt has clear sections corresponding to this framework." in instruction


def test_fragments_are_assembled_in_order():
    instruction = compose_instruction("x", "xml", "care").system_instruction
    positions = [
        instruction.index(fragments.IDENTITY_FRAMING),
        instruction.index(fragments.HYGIENE_HEADER),
        instruction.index(fragments.CORE_HEADER),
        instruction.index(fragments.EXPAND_DIRECTIVE),
        instruction.index("**ADHERE TO FRAMEWORK:**"),
        instruction.index("**ADHERE TO FORMAT:**"),
        instruction.index(fragments.ROOT_ELEMENT_DIRECTIVE),
        instruction.index(fragments.CLOSING_REMINDER),
    ]
    assert positions == sorted(positions)
    assert instruction.startswith("You are the Prompt Architect")
    assert instruction.endswith(fragments.CLOSING_REMINDER)


def test_rules_are_numbered():
    instruction = compose_instruction("x", "text", "standard").system_instruction
    assert "\n4.  **NO EXPLANATIONS:**" in instruction
    assert f"\n5.  **ADHERE TO FRAMEWORK:** {STANDARD_DIRECTIVE}" in instruction
    assert f"\n6.  **ADHERE TO FORMAT:** {format_directive('text')}" in instruction
    assert "\n7.  **USE DESCRIPTIVE ROOT ELEMENT (FOR XML/JSON):**" in instruction


def test_simple_mode_trims_user_input():
    composed = compose_instruction("   a 30-day workout plan \n", "markdown", "standard")
    assert composed.user_content == "a 30-day workout plan"


def test_structured_mode_labels_six_fields_in_order():
    structured = StructuredPrompt(
        role="Coach", task="Plan", format="Table", example="Week 1", input="Beginner", context="Home gym",
    )
    content = build_user_content("ignored", InputMode.STRUCTURED, structured)
    assert content == (
        "Role: Coach\n"
        "Task: Plan\n"
        "Format: Table\n"
        "Example: Week 1\n"
        "Input: Beginner\n"
        "Context: Home gym"
    )


def test_structured_mode_trims_as_a_whole():
    content = build_user_content("", "structured", StructuredPrompt(role="  Coach", context=""))
    assert content.startswith("Role:   Coach\nTask: ")
    assert content.endswith("Context:")


def test_unknown_ids_are_rejected():
    with pytest.raises(ValueError):
        compose_instruction("x", "yaml", "standard")
    with pytest.raises(ValueError):
        compose_instruction("x", "markdown", "smart")
