# contact/management/commands/check_submission.py
import json
import sys

from django.core.management.base import BaseCommand, CommandError

from contact.validation import Rejected, SubmissionInput, validate


class Command(BaseCommand):
    help = "Validate a contact-form submission stored as JSON (file or stdin)."

    def add_arguments(self, parser):
        parser.add_argument("path", nargs="?", default="", help="JSON file keyed by form field names (stdin if omitted)")

    def handle(self, *args, **opts):
        path = opts["path"].strip()
        try:
            if path:
                with open(path, encoding="utf-8") as f:
                    payload = json.load(f)
            else:
                payload = json.load(sys.stdin)
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}")
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON: {e}")

        if not isinstance(payload, dict):
            raise CommandError("Expected a JSON object keyed by form field names.")

        try:
            submission = SubmissionInput.from_wire(payload)
        except TypeError as e:
            raise CommandError(f"Invalid field type: {e}")

        outcome = validate(submission)
        if isinstance(outcome, Rejected):
            for error in outcome.errors():
                self.stderr.write(str(error))
            raise CommandError(f"Submission rejected: {len(outcome.field_errors)} invalid field(s)")

        self.stdout.write(self.style.SUCCESS("Submission accepted"))
        self.stdout.write(json.dumps(outcome.value.to_wire(), ensure_ascii=False, indent=2))
