"""Sequential form prompts for interactive commands.

Forms are plain field descriptions filled one question at a time.
Answers are kept exactly as typed, surrounding whitespace included.
Empty answers are rejected and the same question is asked again.
Commands pass the collected answers to the store as typed values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt

from core.constants import RECORD_DESCRIPTION_FIELD, RECORD_NAME_FIELD
from core.errors import RecordValidationError


@dataclass(frozen=True)
class FormField:
    """One question in a sequential form.

    Attributes:
        name: Answer key.
        message: Question shown to the user.
        empty_message: Message shown when the answer is empty.
    """

    name: str
    message: str
    empty_message: str


class VerbatimPrompt(Prompt):
    """Text prompt that returns answers without stripping whitespace."""

    def process_response(self, value: str) -> str:
        return value


RECORD_FORM = (
    FormField(
        name=RECORD_NAME_FIELD,
        message="Enter name:",
        empty_message="Please enter a name",
    ),
    FormField(
        name=RECORD_DESCRIPTION_FIELD,
        message="Enter description:",
        empty_message="Please enter a description",
    ),
)


def validate_answer(form_field: FormField, value: str) -> str:
    """Return a non-empty answer or raise RecordValidationError."""
    if not value:
        raise RecordValidationError(form_field.empty_message)
    return value


def fill_form(
    console: Console,
    fields: Sequence[FormField],
    defaults: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Ask each field in order until every answer is non-empty.

    Args:
        console: Console used for questions and validation messages.
        fields: Ordered form fields.
        defaults: Optional pre-filled answers returned on empty input.

    Returns:
        Answers keyed by field name.
    """
    answers: dict[str, str] = {}
    for form_field in fields:
        answers[form_field.name] = _ask_until_valid(
            console, form_field, (defaults or {}).get(form_field.name)
        )
    return answers


def confirm(console: Console, message: str) -> bool:
    """Ask a yes/no question that defaults to no."""
    return Confirm.ask(message, console=console, default=False)


def _ask_until_valid(
    console: Console,
    form_field: FormField,
    default: str | None,
) -> str:
    while True:
        if default is None:
            value = VerbatimPrompt.ask(form_field.message, console=console)
        else:
            value = VerbatimPrompt.ask(form_field.message, console=console, default=default)
        try:
            return validate_answer(form_field, value)
        except RecordValidationError as error:
            console.print(f">> {error}", style="red", markup=False, highlight=False)
