import dataclasses

import pytest

from promptcraft.errors import TemplateError
from promptcraft.prompting.template import PromptTemplate, as_template

APPLE = (
    "Next month, Apple is set to release a new iPhone featuring a larger "
    "screen and an improved camera."
)


def test_summarize_scenario_binds_verbatim():
    template = PromptTemplate("Summarize: {{input}}")
    assert template.bind(APPLE) == (
        "Summarize: Next month, Apple is set to release a new iPhone featuring "
        "a larger screen and an improved camera."
    )


@pytest.mark.parametrize("placeholder", ["{{input}}", "{{ input }}", "{{$input}}"])
def test_placeholder_spellings(placeholder: str):
    template = PromptTemplate(f"Before\n{placeholder}\nAfter")
    assert template.has_placeholder
    assert template.bind("middle") == "Before\nmiddle\nAfter"


def test_surrounding_text_unchanged():
    text = "Prefix with {braces} and 100% symbols: {{input}} -- suffix $1."
    bound = PromptTemplate(text).bind("X")
    assert bound == "Prefix with {braces} and 100% symbols: X -- suffix $1."


def test_template_without_placeholder_ignores_input():
    template = PromptTemplate("Write a haiku about the sea.")
    assert not template.has_placeholder
    assert template.bind("ignored input") == "Write a haiku about the sea."


def test_empty_input_is_allowed():
    assert PromptTemplate("Summarize: {{input}}").bind("") == "Summarize: "


def test_placeholder_syntax_in_input_is_not_substituted_again():
    template = PromptTemplate("A {{input}} B")
    assert template.bind("{{input}}") == "A {{input}} B"
    assert template.bind("{{$input}} and {{input}}") == "A {{$input}} and {{input}} B"


def test_other_double_brace_names_pass_through_literally():
    template = PromptTemplate("Dear {{name}}, {{input}} {{ inputs }}")
    assert template.bind("hello") == "Dear {{name}}, hello {{ inputs }}"


def test_repeated_placeholder_rejected():
    with pytest.raises(TemplateError, match="2 input placeholders"):
        PromptTemplate("{{input}} and again {{ input }}")


def test_empty_template_rejected():
    with pytest.raises(TemplateError):
        PromptTemplate("")


def test_template_is_immutable():
    template = PromptTemplate("Summarize: {{input}}")
    with pytest.raises(dataclasses.FrozenInstanceError):
        template.text = "changed"  # type: ignore[misc]


def test_templates_compare_by_text():
    assert PromptTemplate("Q: {{input}}") == PromptTemplate("Q: {{input}}")
    assert as_template("Q: {{input}}") == PromptTemplate("Q: {{input}}")


def test_from_file(tmp_path):
    path = tmp_path / "skprompt.txt"
    path.write_text("Translate to French:\n{{$input}}\n", encoding="utf-8")

    template = PromptTemplate.from_file(path)

    assert template.bind("Good morning") == "Translate to French:\nGood morning\n"
