"""Validation of contact-form submissions.

``validate`` runs a :class:`SubmissionInput` through :class:`~contact.forms.ContactForm`
and returns exactly one of two outcomes::

    outcome = validate(submission)
    if isinstance(outcome, Rejected):
        outcome.field_errors   # {"email": ["*Invalid email address"], ...}
    else:
        outcome.value          # the normalized SubmissionInput

Every rule of every field is evaluated, so a rejection reports all failing fields
at once. Only failing fields appear in ``field_errors`` and each of them carries at
least one message.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping, Union

from .forms import ContactForm

# Python attribute -> name used by the HTML form and the JSON payloads.
WIRE_NAMES = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "query_type": "queryType",
    "message": "message",
    "consent": "consent",
}


@dataclass(frozen=True)
class SubmissionInput:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    query_type: str = ""
    message: str = ""
    consent: bool = False

    @classmethod
    def from_post(cls, data: Mapping) -> SubmissionInput:
        """Build a submission from a posted form (``request.POST`` or a plain dict).

        Text fields default to an empty string when absent. ``consent`` follows
        checkbox semantics: ticked means the value ``"on"``.
        """
        return cls(
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            email=data.get("email") or "",
            query_type=data.get("queryType") or "",
            message=data.get("message") or "",
            consent=data.get("consent") == "on",
        )

    @classmethod
    def from_wire(cls, data: Mapping) -> SubmissionInput:
        """Build a submission from a decoded JSON object keyed by wire names.

        Missing or null fields take their defaults.

        Raises:
            TypeError: If a text field is not a string or ``consent`` is not a boolean.
        """
        values = {}
        for attr, wire in WIRE_NAMES.items():
            value = data.get(wire)
            if value is None:
                continue
            expected = bool if attr == "consent" else str
            if not isinstance(value, expected):
                raise TypeError(f"{wire} must be a {'boolean' if expected is bool else 'string'}")
            values[attr] = value
        return cls(**values)

    def to_wire(self) -> dict:
        return {WIRE_NAMES[k]: v for k, v in asdict(self).items()}


@dataclass(frozen=True)
class FieldValidationError:
    """One failed rule for one field."""

    field: str
    message: str

    def __str__(self):
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class Accepted:
    value: SubmissionInput


@dataclass(frozen=True)
class Rejected:
    field_errors: dict[str, list[str]]

    def errors(self) -> list[FieldValidationError]:
        return [
            FieldValidationError(field, message)
            for field, messages in self.field_errors.items()
            for message in messages
        ]


ValidationOutcome = Union[Accepted, Rejected]


def validate(submission: SubmissionInput) -> ValidationOutcome:
    form = ContactForm(data=submission.to_wire())
    if not form.is_valid():
        return Rejected({name: list(messages) for name, messages in form.errors.items()})

    data = form.cleaned_data
    return Accepted(
        SubmissionInput(
            first_name=data["firstName"],
            last_name=data["lastName"],
            email=data["email"],
            query_type=data["queryType"],
            message=data["message"],
            consent=data["consent"],
        )
    )
