from typing import Any, Mapping, Optional

from flask import current_app

from artroad.extensions import db
from artroad.domain.exceptions import (
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from artroad.models import AdminUser
from artroad.utils.transaction import transactional


def _normalized_email(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip().lower()


def authenticate(email: Any, password: Any) -> AdminUser:
    email = _normalized_email(email)
    if not email or not isinstance(password, str) or not password:
        raise ValidationError("Email and password required", "MISSING_CREDENTIALS")

    user = AdminUser.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        current_app.logger.warning("auth.login failed email=%s", email)
        raise AuthError("Invalid credentials", "INVALID_CREDENTIALS")

    if not user.is_active:
        raise ForbiddenError("User account disabled", "ACCOUNT_DISABLED")

    return user


def create_admin(data: Mapping[str, Any]) -> AdminUser:
    email = _normalized_email(data.get("email"))
    name = data.get("name")
    password = data.get("password")

    if not email:
        raise ValidationError("Email is required", "MISSING_EMAIL")
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required", "MISSING_NAME")
    if not isinstance(password, str) or not password:
        raise ValidationError("Password is required", "MISSING_PASSWORD")

    if AdminUser.query.filter_by(email=email).first():
        raise ConflictError("User with this email already exists", "DUPLICATE_EMAIL")

    user = AdminUser(email=email, name=name.strip(), role="admin", is_active=True)
    user.set_password(password)

    with transactional():
        db.session.add(user)

    current_app.logger.info("admin.create id=%s email=%s", user.id, email)
    return user


def change_credentials(user_id: int, data: Mapping[str, Any]) -> AdminUser:
    """
    Replace the e-mail and/or password of the signed-in admin.

    The current password must be re-entered; at least one new value is
    required.
    """
    user = db.session.get(AdminUser, user_id)
    if user is None:
        raise NotFoundError("Admin user not found", "ADMIN_NOT_FOUND")

    current_password = data.get("currentPassword")
    if not isinstance(current_password, str) or not user.check_password(current_password):
        raise AuthError("Current password is incorrect", "INVALID_CREDENTIALS")

    new_email = _normalized_email(data.get("newEmail"))
    new_password = data.get("newPassword")
    if not isinstance(new_password, str) or not new_password:
        new_password = None

    if not new_email and not new_password:
        raise ValidationError(
            "Please provide a new email or password", "NOTHING_TO_UPDATE"
        )

    if new_email and new_email != user.email:
        if AdminUser.query.filter_by(email=new_email).first():
            raise ConflictError("User with this email already exists", "DUPLICATE_EMAIL")

    with transactional():
        if new_email:
            user.email = new_email
        if new_password:
            user.set_password(new_password)
        user.touch()

    current_app.logger.info(
        "admin.credentials id=%s email_changed=%s password_changed=%s",
        user.id,
        bool(new_email),
        bool(new_password),
    )
    return user
