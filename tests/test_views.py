from __future__ import annotations

import pytest
from django.test import Client

from contact.forms import CONSENT_ERROR, EMAIL_ERROR, FIRST_NAME_ERROR, MESSAGE_ERROR
from contact.validation import Accepted, Rejected, SubmissionInput
from contact.views import PageState, confirmation_rows

VALID_POST = {
    "firstName": "Al",
    "lastName": "Li",
    "email": "a@b.com",
    "queryType": "general",
    "message": "hi",
    "consent": "on",
}


@pytest.fixture
def client() -> Client:
    return Client()


def test_get_renders_empty_form(client: Client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    state = response.context["state"]
    assert state == PageState()
    assert state.selected_query_type == "general"
    assert not state.show_confirmation
    body = response.content.decode()
    assert "Contact Us" in body
    assert "<title>Frontend Mentor | Contact form</title>" in body
    assert "Form Submission Received" not in body


def test_post_valid_shows_confirmation(client: Client) -> None:
    response = client.post("/", VALID_POST)

    assert response.status_code == 200
    state = response.context["state"]
    assert state.show_confirmation
    assert isinstance(state.outcome, Accepted)
    assert response.context["confirmation_rows"][-1] == ("Consent:", "Yes")
    body = response.content.decode()
    assert "Form Submission Received" in body
    assert "a@b.com" in body


def test_post_invalid_shows_errors_inline(client: Client) -> None:
    data = dict(VALID_POST, firstName="A", email="bad", message="", queryType="support")
    del data["consent"]

    response = client.post("/", data)

    assert response.status_code == 200
    state = response.context["state"]
    assert isinstance(state.outcome, Rejected)
    assert not state.show_confirmation
    assert state.selected_query_type == "support"
    body = response.content.decode()
    for message in (FIRST_NAME_ERROR, EMAIL_ERROR, MESSAGE_ERROR, CONSENT_ERROR):
        assert message in body
    assert "Form Submission Received" not in body
    # submitted values are kept in the inputs
    assert 'value="Li"' in body


def test_missing_query_type_falls_back_to_general_selection(client: Client) -> None:
    data = dict(VALID_POST)
    del data["queryType"]

    response = client.post("/", data)

    state = response.context["state"]
    assert isinstance(state.outcome, Accepted)
    assert state.selected_query_type == "general"


def test_contact_page_rejects_other_methods(client: Client) -> None:
    assert client.put("/").status_code == 405


def test_submit_endpoint_accepts(client: Client) -> None:
    response = client.post("/submit/", VALID_POST)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "submission": {
            "firstName": "Al",
            "lastName": "Li",
            "email": "a@b.com",
            "queryType": "general",
            "message": "hi",
            "consent": True,
        },
    }


def test_submit_endpoint_reports_all_errors(client: Client) -> None:
    response = client.post(
        "/submit/",
        {"firstName": "A", "lastName": "Li", "email": "bad", "queryType": "support", "message": ""},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "errors": {
            "firstName": [FIRST_NAME_ERROR],
            "email": [EMAIL_ERROR],
            "message": [MESSAGE_ERROR],
            "consent": [CONSENT_ERROR],
        },
    }


def test_submit_endpoint_requires_post(client: Client) -> None:
    assert client.get("/submit/").status_code == 405


def test_confirmation_rows_render_consent_as_yes_no() -> None:
    rows = confirmation_rows(SubmissionInput(first_name="Al", consent=False))

    assert [label for label, _ in rows] == [
        "First Name:",
        "Last Name:",
        "Email:",
        "Query Type:",
        "Message:",
        "Consent:",
    ]
    assert rows[0] == ("First Name:", "Al")
    assert rows[-1] == ("Consent:", "No")


def test_page_state_exposes_outcome_parts() -> None:
    rejected = PageState(outcome=Rejected({"email": [EMAIL_ERROR]}))
    accepted = PageState(outcome=Accepted(SubmissionInput(first_name="Al")), show_confirmation=True)

    assert rejected.field_errors == {"email": [EMAIL_ERROR]}
    assert rejected.submission is None
    assert accepted.field_errors == {}
    assert accepted.submission.first_name == "Al"


def test_submit_endpoint_rejects_padded_email(client: Client) -> None:
    response = client.post("/submit/", dict(VALID_POST, email=" a@b.com"))

    assert response.status_code == 400
    assert response.json() == {"success": False, "errors": {"email": [EMAIL_ERROR]}}
