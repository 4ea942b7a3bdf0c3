# contact/forms.py
from django import forms
from django.core import validators

QUERY_TYPE_GENERAL = "general"
QUERY_TYPE_SUPPORT = "support"
QUERY_TYPE_CHOICES = [
    (QUERY_TYPE_GENERAL, "General Enquiry"),
    (QUERY_TYPE_SUPPORT, "Support Request"),
]

FIRST_NAME_ERROR = "*First Name must be at least 2 characters long"
LAST_NAME_ERROR = "*Last Name must be at least 2 characters long"
EMAIL_ERROR = "*Invalid email address"
MESSAGE_ERROR = "*Message cannot be empty"
CONSENT_ERROR = "*Consent is required"


class RawCharField(forms.CharField):
    """CharField that keeps the posted text as is: no stripping, null characters allowed."""

    def __init__(self, **kwargs):
        kwargs.setdefault("strip", False)
        super().__init__(**kwargs)
        self.validators = [
            v for v in self.validators
            if not isinstance(v, validators.ProhibitNullCharactersValidator)
        ]


class ContactForm(forms.Form):
    # Field names are the wire names posted by the page.
    firstName = RawCharField(
        label="First Name",
        min_length=2,
        error_messages={"required": FIRST_NAME_ERROR, "min_length": FIRST_NAME_ERROR},
    )
    lastName = RawCharField(
        label="Last Name",
        min_length=2,
        error_messages={"required": LAST_NAME_ERROR, "min_length": LAST_NAME_ERROR},
    )
    # Not an EmailField: that one always strips and adds its own length message.
    # validate_email already rejects addresses over 320 characters as invalid.
    email = RawCharField(
        label="Email",
        widget=forms.EmailInput,
        validators=[validators.validate_email],
        error_messages={"required": EMAIL_ERROR, "invalid": EMAIL_ERROR},
    )
    # Any value, or none at all, is accepted.
    queryType = RawCharField(
        label="Query Type",
        required=False,
        widget=forms.RadioSelect(choices=QUERY_TYPE_CHOICES),
    )
    message = RawCharField(
        label="Message",
        widget=forms.Textarea,
        error_messages={"required": MESSAGE_ERROR},
    )
    consent = forms.BooleanField(
        label="I consent to being contacted by the team",
        error_messages={"required": CONSENT_ERROR},
    )
