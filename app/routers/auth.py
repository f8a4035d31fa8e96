from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from typing import Annotated

from ..schemas.auth import TokenResponse
from ..deps import get_db
from ..handlers import auth as auth_handler
from ..logging_setup import setup_logger

router = APIRouter(prefix="/auth", tags=["auth"])

logger = setup_logger()


@router.post("/login", response_model=TokenResponse)
def login(
    form: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: Annotated[Session, Depends(get_db)],
    request: Request,
):
    try:
        return auth_handler.login(
            username=form.username, password=form.password, db=db
        )
    except HTTPException as exc:
        logger.warning(
            "login failed",
            extra={
                "event_type": "login_failed",
                "src_ip": request.client.host if request.client else None,
                "user_agent": (request.headers.get("user-agent") or "")[:256],
                "status": exc.status_code,
            },
        )
        raise
