from collections.abc import Mapping

from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlmodel import col

from ..auth.passwords import PasswordTooLongError, hash_password
from ..domain.errors import SettingsValidationError
from ..i18n.catalog import translate
from ..models import User
from ..schemas.user_settings import UserSettingsRead
from ..helpers.user_settings import (
    decode_settings_form,
    validate_settings,
    merge_settings,
)


def _form_error(code: str, language: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"code": code, "message": translate(code, language)},
    )


def _username_taken(db: Session, username: str, current_user: User) -> bool:
    other = (
        db.query(User)
        .filter(
            col(User.username) == username,
            col(User.id) != current_user.id,
        )
        .first()
    )
    return other is not None


def get_my_settings(*, current_user: User) -> UserSettingsRead:
    return UserSettingsRead.model_validate(current_user)


def update_my_settings(
    *,
    values: Mapping[str, str],
    db: Session,
    current_user: User,
) -> UserSettingsRead:
    # errors are shown in the language the page was rendered in
    language = current_user.language

    form = decode_settings_form(values)
    try:
        validated = validate_settings(form)
    except SettingsValidationError as exc:
        raise _form_error(exc.code, language) from exc

    if validated.username != current_user.username and _username_taken(
        db, validated.username, current_user
    ):
        raise _form_error("error.user_already_exists", language)

    new_password_hash = None
    if validated.password:
        try:
            new_password_hash = hash_password(validated.password)
        except PasswordTooLongError as exc:
            raise _form_error("error.password_too_long", language) from exc

    user = merge_settings(validated, current_user)
    if new_password_hash is not None:
        user.password = new_password_hash

    db.commit()
    db.refresh(user)

    return UserSettingsRead.model_validate(user)
