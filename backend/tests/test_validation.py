# tests/test_validation.py
import pytest

from artroad.domain.exceptions import ValidationError
from artroad.domain.fields import BOOL, EMAIL, ENUM, INT, FieldSpec, localized, snake_caps
from artroad.domain.validation import INT_MAX, INT_MIN, clean_draft, is_loose_email, parse_int

SPECS = (
    FieldSpec("title", "title", required=True),
    FieldSpec("priceStart", "price_start", kind=INT, minimum=0, default=0),
    FieldSpec("isActive", "is_active", kind=BOOL, default=True),
    FieldSpec("kind", "kind", kind=ENUM, choices=("a", "b"), default="a"),
    FieldSpec("note", "note", nullable=True),
)


def _code(specs, data, **kwargs):
    with pytest.raises(ValidationError) as excinfo:
        clean_draft(specs, data, **kwargs)
    return excinfo.value.code


def test_snake_caps():
    assert snake_caps("orderIndex") == "ORDER_INDEX"
    assert snake_caps("isFavourite") == "IS_FAVOURITE"
    assert snake_caps("category") == "CATEGORY"


def test_localized_expands_three_locales():
    specs = localized("title", "title", required=True)

    assert [s.name for s in specs] == ["titleEn", "titleFr", "titleAr"]
    assert [s.attr for s in specs] == ["title_en", "title_fr", "title_ar"]
    assert all(s.required for s in specs)


def test_error_code_defaults():
    assert FieldSpec("priceStart", "price_start", kind=INT).error_code == "INVALID_PRICE_START"
    assert FieldSpec("email", "email", kind=EMAIL).error_code == "INVALID_EMAIL_FORMAT"
    assert FieldSpec("x", "x", invalid_code="CUSTOM").error_code == "CUSTOM"


@pytest.mark.parametrize(
    "raw, expected",
    [(5, 5), ("12", 12), (" -3 ", -3), ("1.5", None), ("abc", None), (True, None), (None, None)],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_loose_email():
    assert is_loose_email("a@b.c")
    assert not is_loose_email("a@b")
    assert not is_loose_email("a.b")


def test_create_fills_defaults():
    cleaned = clean_draft(SPECS, {"title": "  Hello "})

    assert cleaned == {
        "title": "Hello",
        "price_start": 0,
        "is_active": True,
        "kind": "a",
        "note": None,
    }


def test_update_only_returns_supplied_fields():
    cleaned = clean_draft(SPECS, {"isActive": False, "unknown": 1}, partial=True)

    assert cleaned == {"is_active": False}


def test_required_field_codes():
    assert _code(SPECS, {}) == "MISSING_REQUIRED_FIELD"
    assert _code(SPECS, {"title": None}) == "MISSING_REQUIRED_FIELD"
    assert _code(SPECS, {"title": 7}) == "MISSING_REQUIRED_FIELD"
    assert _code(SPECS, {"title": ""}, partial=True) == "INVALID_FIELD_VALUE"
    assert _code(SPECS, {"title": None}, partial=True) == "INVALID_FIELD_VALUE"


def test_typed_field_codes():
    base = {"title": "x"}

    assert _code(SPECS, {**base, "priceStart": -1}) == "INVALID_PRICE_START"
    assert _code(SPECS, {**base, "priceStart": "ten"}) == "INVALID_PRICE_START"
    assert _code(SPECS, {**base, "isActive": "true"}) == "INVALID_IS_ACTIVE"
    assert _code(SPECS, {**base, "kind": "c"}) == "INVALID_KIND"


def test_null_clears_nullable_field_on_update():
    assert clean_draft(SPECS, {"note": None}, partial=True) == {"note": None}
    assert clean_draft(SPECS, {"note": "  "}, partial=True) == {"note": None}


def test_null_optional_field_takes_default_on_create():
    cleaned = clean_draft(SPECS, {"title": "x", "priceStart": None})

    assert cleaned["price_start"] == 0


def test_first_failing_field_wins():
    # title is declared before priceStart
    assert _code(SPECS, {"priceStart": -1}) == "MISSING_REQUIRED_FIELD"


def test_parse_int_stays_within_storable_range():
    assert parse_int(str(INT_MAX)) == INT_MAX
    assert parse_int(INT_MAX + 1) is None
    assert parse_int(str(INT_MIN - 1)) is None


def test_parse_int_clamps_on_request():
    assert parse_int(10 ** 30, clamp=True) == INT_MAX
    assert parse_int(-(10 ** 30), clamp=True) == INT_MIN
    assert parse_int("nope", clamp=True) is None
