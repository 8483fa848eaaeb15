from typing import Any, Dict, List, Mapping, Tuple

from flask import current_app
from sqlalchemy.exc import IntegrityError

from artroad.extensions import db
from artroad.domain.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from artroad.domain.fields import FieldSpec
from artroad.domain.validation import clean_draft
from artroad.models import SiteSetting
from artroad.normalizers.setting import normalize_setting
from artroad.utils.transaction import transactional

# Written only when supplied; null or blank clears them (themeMode excepted)
OPTIONAL_COLUMNS = (
    FieldSpec("description", "description", nullable=True),
    FieldSpec("themeMode", "theme_mode"),
    FieldSpec("heroBgUrl", "hero_bg_url", nullable=True),
    FieldSpec("logoLightUrl", "logo_light_url", nullable=True),
    FieldSpec("logoDarkUrl", "logo_dark_url", nullable=True),
    FieldSpec("whatsappNumber", "whatsapp_number", nullable=True),
)


def _required_text(data: Mapping[str, Any], name: str, code: str) -> str:
    value = data.get(name)

    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name.capitalize()} is required", code)

    return value.strip()


def _clean(data: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Validate one {key, value, ...} payload.

    value is required on every write, including updates of an existing
    key, so a stored value can never be blanked through this path.
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Each setting must be a JSON object", "INVALID_BODY")

    key = _required_text(data, "key", "MISSING_KEY")
    values = {"value": _required_text(data, "value", "MISSING_VALUE")}
    values.update(clean_draft(OPTIONAL_COLUMNS, data, partial=True))
    return key, values


def find_setting(key: str):
    return SiteSetting.query.filter_by(key=key).first()


# -------------------------------------------------
# Reads
# -------------------------------------------------
def get_setting(key: str) -> SiteSetting:
    setting = find_setting(key)
    if setting is None:
        raise NotFoundError("Setting not found", "SETTING_NOT_FOUND")
    return setting


def get_settings(keys_param: str) -> List[SiteSetting]:
    """Return whichever of the comma-separated keys exist."""
    keys = [k.strip() for k in keys_param.split(",") if k.strip()]

    if not keys:
        raise ValidationError("No valid keys provided", "INVALID_KEYS")

    return (
        SiteSetting.query
        .filter(SiteSetting.key.in_(keys))
        .order_by(SiteSetting.id.asc())
        .all()
    )


def list_settings() -> List[SiteSetting]:
    return SiteSetting.query.order_by(SiteSetting.id.asc()).all()


# -------------------------------------------------
# Writes
# -------------------------------------------------
def create_setting(data: Mapping[str, Any]) -> SiteSetting:
    """Insert-only path: an existing key is rejected with DUPLICATE_KEY."""
    key, values = _clean(data)

    if find_setting(key) is not None:
        raise DuplicateKeyError()

    setting = SiteSetting(key=key, **values)

    try:
        with transactional():
            db.session.add(setting)
    except IntegrityError as exc:
        # Concurrent insert of the same key won the race
        raise DuplicateKeyError() from exc

    current_app.logger.info("setting.create key=%s", key)
    return setting


def upsert_setting(data: Mapping[str, Any]) -> Tuple[SiteSetting, bool]:
    """
    Insert the key if absent, otherwise update the supplied columns.

    Returns (setting, created).
    """
    key, values = _clean(data)
    setting = find_setting(key)
    created = setting is None

    with transactional():
        if created:
            setting = SiteSetting(key=key, **values)
            db.session.add(setting)
        else:
            for attr, value in values.items():
                setattr(setting, attr, value)
            setting.touch()

    current_app.logger.info(
        "setting.%s key=%s", "create" if created else "update", key
    )
    return setting, created


def bulk_upsert(items: List[Any]) -> List[SiteSetting]:
    """
    Upsert each item in order, committing one at a time.

    The first invalid item stops the loop and its error propagates; items
    before it stay written.
    """
    written = []

    for item in items:
        setting, _ = upsert_setting(item)
        written.append(setting)

    return written


def delete_setting(key: str) -> Dict[str, Any]:
    setting = get_setting(key)
    snapshot = normalize_setting(setting)

    with transactional():
        db.session.delete(setting)

    current_app.logger.info("setting.delete key=%s", key)
    return snapshot
