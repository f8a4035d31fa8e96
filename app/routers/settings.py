from typing import Annotated

from fastapi import APIRouter, Depends, Request, HTTPException
from sqlalchemy.orm import Session

from ..deps import get_db, get_current_user, get_form_values
from ..logging_setup import setup_logger
from ..models import User
from ..schemas.user_settings import UserSettingsRead
from ..handlers import settings as settings_handler

router = APIRouter(
    prefix="/settings",
    tags=["settings"],
)

logger = setup_logger()

DB = Annotated[Session, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]
FormValues = Annotated[dict[str, str], Depends(get_form_values)]


def _changed_fields(before: UserSettingsRead, after: UserSettingsRead) -> list[str]:
    old = before.model_dump()
    new = after.model_dump()
    return [name for name in new if old.get(name) != new[name]]


@router.get("", response_model=UserSettingsRead)
def get_my_settings(
    current_user: CurrentUser,
    request: Request,
):
    request.state.user_id = str(current_user.id)
    return settings_handler.get_my_settings(current_user=current_user)


@router.post("", response_model=UserSettingsRead)
def update_my_settings(
    values: FormValues,
    db: DB,
    current_user: CurrentUser,
    request: Request,
):
    request.state.user_id = str(current_user.id)
    before = settings_handler.get_my_settings(current_user=current_user)
    password_before = current_user.password

    try:
        settings = settings_handler.update_my_settings(
            values=values, db=db, current_user=current_user
        )

    except HTTPException as exc:
        if exc.status_code == 400:
            detail = exc.detail if isinstance(exc.detail, dict) else {}
            logger.info(
                "settings rejected",
                extra={
                    "event_type": "settings_rejected",
                    "user_id": str(current_user.id),
                    "src_ip": request.client.host if request.client else None,
                    "status": exc.status_code,
                    "error_code": detail.get("code"),
                },
            )
        raise

    logger.info(
        "settings updated",
        extra={
            "event_type": "audit_settings_updated",
            "user_id": str(current_user.id),
            "src_ip": request.client.host if request.client else None,
            "user_agent": (request.headers.get("user-agent") or "")[:256],
            "data": {
                "changed_fields": _changed_fields(before, settings),
                "password_changed": current_user.password != password_before,
            },
        },
    )

    return settings
