import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

# Field kinds understood by the draft validator
TEXT = "text"
INT = "int"
BOOL = "bool"
ENUM = "enum"
EMAIL = "email"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def snake_caps(name: str) -> str:
    """orderIndex -> ORDER_INDEX"""
    return _CAMEL_BOUNDARY.sub("_", name).upper()


@dataclass(frozen=True)
class FieldSpec:
    """
    Declarative rule for one writable field of a resource.

    `name` is the camelCase wire name, `attr` the model attribute.
    A `default` may be a plain value or a zero-argument callable; it is only
    applied on create, when the field is absent.
    """

    name: str
    attr: str
    kind: str = TEXT
    required: bool = False
    default: Any = None
    choices: Tuple[str, ...] = ()
    max_length: Optional[int] = None
    minimum: Optional[int] = None
    # Optional text that may be stored as NULL when blank
    nullable: bool = False
    lowercase: bool = False
    invalid_code: Optional[str] = None

    @property
    def error_code(self) -> str:
        if self.invalid_code:
            return self.invalid_code
        if self.kind == EMAIL:
            return "INVALID_EMAIL_FORMAT"
        return f"INVALID_{snake_caps(self.name)}"

    def default_value(self):
        return self.default() if callable(self.default) else self.default


def localized(prefix: str, attr_prefix: str, **options) -> Tuple[FieldSpec, ...]:
    """
    Expand one multilingual field into its three parallel locale columns.

    All three locales share the same rule so they are required together.
    """
    return tuple(
        FieldSpec(name=f"{prefix}{suffix}", attr=f"{attr_prefix}_{suffix.lower()}", **options)
        for suffix in ("En", "Fr", "Ar")
    )
