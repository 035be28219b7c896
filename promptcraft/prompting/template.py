"""
One-placeholder prompt templates.

A template is static text with at most one substitution point named
``input``. Accepted spellings are ``{{input}}``, ``{{ input }}`` and
``{{$input}}``. Any other ``{{...}}`` text is ordinary template content and
is sent to the model as written.

Binding is a single pass: the input is spliced in once and never scanned
again, so placeholder syntax inside the input stays literal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from promptcraft.errors import TemplateError

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*\$?input\s*\}\}")


@dataclass(frozen=True)
class PromptTemplate:
    text: str
    _span: tuple[int, int] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.text:
            raise TemplateError("Prompt template text must not be empty.")

        matches = list(PLACEHOLDER_PATTERN.finditer(self.text))
        if len(matches) > 1:
            raise TemplateError(
                f"Prompt template has {len(matches)} input placeholders; "
                "at most one is supported."
            )
        span = matches[0].span() if matches else None
        object.__setattr__(self, "_span", span)

    @classmethod
    def from_file(cls, path: str | Path) -> PromptTemplate:
        return cls(Path(path).read_text(encoding="utf-8"))

    @property
    def has_placeholder(self) -> bool:
        return self._span is not None

    def bind(self, value: str = "") -> str:
        """Return the template text with ``value`` in place of the placeholder.

        Without a placeholder the text is returned unchanged and ``value`` is
        ignored.
        """
        if self._span is None:
            return self.text
        start, end = self._span
        return self.text[:start] + value + self.text[end:]

    def __str__(self) -> str:
        return self.text


def as_template(template: PromptTemplate | str) -> PromptTemplate:
    if isinstance(template, PromptTemplate):
        return template
    return PromptTemplate(template)
