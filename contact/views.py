import logging
from dataclasses import dataclass
from typing import Optional

from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_http_methods, require_POST

from .forms import QUERY_TYPE_CHOICES, QUERY_TYPE_GENERAL, ContactForm
from .validation import Accepted, Rejected, SubmissionInput, ValidationOutcome, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageState:
    """Everything the contact template needs for one render."""

    selected_query_type: str = QUERY_TYPE_GENERAL
    show_confirmation: bool = False
    outcome: Optional[ValidationOutcome] = None

    @property
    def field_errors(self):
        if isinstance(self.outcome, Rejected):
            return self.outcome.field_errors
        return {}

    @property
    def submission(self):
        if isinstance(self.outcome, Accepted):
            return self.outcome.value
        return None


def confirmation_rows(submission):
    """(label, value) pairs shown in the confirmation popup."""
    return [
        ("First Name:", submission.first_name),
        ("Last Name:", submission.last_name),
        ("Email:", submission.email),
        ("Query Type:", submission.query_type),
        ("Message:", submission.message),
        ("Consent:", "Yes" if submission.consent else "No"),
    ]


def log_outcome(outcome, source):
    if isinstance(outcome, Rejected):
        logger.info("%s submission rejected: %s", source, ", ".join(outcome.field_errors))
    else:
        logger.info("%s submission accepted", source)


@require_http_methods(["GET", "POST"])
def contact_page(request):
    if request.method == "GET":
        return render(request, "contact.html", _page_context(ContactForm(), PageState()))

    submission = SubmissionInput.from_post(request.POST)
    outcome = validate(submission)
    log_outcome(outcome, "page")

    state = PageState(
        selected_query_type=submission.query_type or QUERY_TYPE_GENERAL,
        show_confirmation=isinstance(outcome, Accepted),
        outcome=outcome,
    )
    # Bound so the inputs keep what the user typed.
    form = ContactForm(request.POST)
    return render(request, "contact.html", _page_context(form, state))


@require_POST
def contact_submit(request):
    outcome = validate(SubmissionInput.from_post(request.POST))
    log_outcome(outcome, "api")
    if isinstance(outcome, Rejected):
        return JsonResponse({"success": False, "errors": outcome.field_errors}, status=400)
    return JsonResponse({"success": True, "submission": outcome.value.to_wire()})


def _page_context(form, state):
    context = {
        "form": form,
        "state": state,
        "errors": state.field_errors,
        "query_types": QUERY_TYPE_CHOICES,
    }
    if state.show_confirmation:
        context["confirmation_rows"] = confirmation_rows(state.submission)
    return context
