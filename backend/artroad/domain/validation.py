import re
from typing import Any, Dict, Iterable, Mapping, Optional

from .exceptions import ValidationError
from .fields import BOOL, EMAIL, ENUM, INT, TEXT, FieldSpec

_INT_PATTERN = re.compile(r"^[+-]?\d+$")

# Signed 64-bit, the widest INTEGER the store accepts
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def is_loose_email(value: str) -> bool:
    # Deliberately loose: only "@" and "." must both be present
    return "@" in value and "." in value


def parse_unbounded_int(value: Any) -> Optional[int]:
    """Return an int for JSON integers or decimal-digit strings, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_PATTERN.match(value.strip()):
        return int(value.strip())
    return None


def parse_int(value: Any, *, clamp: bool = False) -> Optional[int]:
    """
    Like parse_unbounded_int, limited to the storable range.

    Out-of-range numbers give None, or the nearest bound with `clamp`.
    """
    number = parse_unbounded_int(value)
    if number is None or INT_MIN <= number <= INT_MAX:
        return number
    if clamp:
        return max(INT_MIN, min(number, INT_MAX))
    return None


def _missing(spec: FieldSpec) -> ValidationError:
    return ValidationError(
        f"{spec.name} is required and must be a non-empty string",
        "MISSING_REQUIRED_FIELD",
    )


def _rejected(spec: FieldSpec, partial: bool, message: Optional[str] = None) -> ValidationError:
    if spec.required:
        if not partial:
            return _missing(spec)
        return ValidationError(
            f"{spec.name} must be a non-empty string", "INVALID_FIELD_VALUE"
        )
    return ValidationError(message or f"{spec.name} has an invalid value", spec.error_code)


def _clean_text(spec: FieldSpec, value: Any, partial: bool):
    if not isinstance(value, str):
        raise _rejected(spec, partial, f"{spec.name} must be a string")

    text = value.strip()
    if spec.lowercase:
        text = text.lower()

    if not text:
        if spec.nullable:
            return None
        if not partial and not spec.required and spec.default is not None:
            return spec.default_value()
        raise _rejected(spec, partial, f"{spec.name} cannot be empty")

    if spec.max_length is not None and len(text) > spec.max_length:
        raise ValidationError(
            f"{spec.name} must be {spec.max_length} characters or less",
            spec.error_code,
        )

    if spec.kind == EMAIL and not is_loose_email(text):
        raise ValidationError(
            "Invalid email format. Email must contain @ and .",
            "INVALID_EMAIL_FORMAT",
        )

    return text


def clean_value(spec: FieldSpec, value: Any, *, partial: bool = False) -> Any:
    """Validate and normalize a single supplied (non-null) value."""
    if spec.kind in (TEXT, EMAIL):
        return _clean_text(spec, value, partial)

    if spec.kind == INT:
        number = parse_int(value)
        if number is None:
            raise ValidationError(f"{spec.name} must be a valid integer", spec.error_code)
        if spec.minimum is not None and number < spec.minimum:
            raise ValidationError(
                f"{spec.name} must be an integer >= {spec.minimum}", spec.error_code
            )
        return number

    if spec.kind == BOOL:
        if not isinstance(value, bool):
            raise ValidationError(f"{spec.name} must be a boolean", spec.error_code)
        return value

    if spec.kind == ENUM:
        choice = value.strip() if isinstance(value, str) else None
        if choice not in spec.choices:
            raise ValidationError(
                f"{spec.name} must be one of: {', '.join(spec.choices)}",
                spec.error_code,
            )
        return choice

    raise ValueError(f"Unknown field kind: {spec.kind}")


def clean_draft(
    specs: Iterable[FieldSpec],
    data: Mapping[str, Any],
    *,
    partial: bool = False,
) -> Dict[str, Any]:
    """
    Turn a JSON draft into model attribute values.

    Create (`partial=False`):
    - required fields must be present and non-empty after trimming
    - absent optional fields receive their defaults

    Update (`partial=True`):
    - only supplied fields are validated and returned
    - absent fields are left out so the stored values stay untouched

    The first failing field raises; specs are checked in declaration order.
    """
    cleaned: Dict[str, Any] = {}

    for spec in specs:
        if spec.name not in data:
            if partial:
                continue
            if spec.required:
                raise _missing(spec)
            cleaned[spec.attr] = spec.default_value()
            continue

        value = data[spec.name]

        if value is None:
            if spec.nullable:
                cleaned[spec.attr] = None
            elif not partial and not spec.required:
                cleaned[spec.attr] = spec.default_value()
            else:
                raise _rejected(spec, partial, f"{spec.name} cannot be null")
            continue

        cleaned[spec.attr] = clean_value(spec, value, partial=partial)

    return cleaned
