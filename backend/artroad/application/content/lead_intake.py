from typing import Any, Dict, Mapping

from artroad.domain.exceptions import ValidationError
from artroad.domain.fields import FieldSpec
from artroad.domain.validation import clean_value, is_loose_email

REQUIRED_SUBMISSION_FIELDS = ("name", "email", "phone", "message")

SERVICE_INTEREST = FieldSpec("serviceInterest", "service_interest", nullable=True)


def validate_submission(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Turn an anonymous contact-form submission into Lead column values.

    Order of checks (first failure wins):
    1. every required field present and non-empty as sent
    2. trim every string (e-mail is also lower-cased)
    3. every required field still non-empty after trimming
    4. loose e-mail shape check

    No deduplication or rate limiting: every well-formed submission is kept.
    """
    for name in REQUIRED_SUBMISSION_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or value == "":
            raise ValidationError(
                "Missing required fields: name, email, phone, and message are required",
                "MISSING_REQUIRED_FIELDS",
            )

    values = {name: data[name].strip() for name in REQUIRED_SUBMISSION_FIELDS}
    values["email"] = values["email"].lower()

    if not all(values.values()):
        raise ValidationError(
            "Required fields cannot be empty after trimming",
            "EMPTY_REQUIRED_FIELDS",
        )

    if not is_loose_email(values["email"]):
        raise ValidationError(
            "Invalid email format. Email must contain @ and .",
            "INVALID_EMAIL_FORMAT",
        )

    interest = data.get("serviceInterest")
    values["service_interest"] = (
        clean_value(SERVICE_INTEREST, interest) if interest is not None else None
    )

    values["source"] = "website"
    values["status"] = "new"
    return values
