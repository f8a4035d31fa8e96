from collections.abc import Generator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from sqlmodel import col
from typing import Annotated

from .auth.jwt import InvalidTokenError, decode_access_token
from .database import SessionLocal
from .models import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    try:
        user_id = decode_access_token(token)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access token",
        )

    user = db.query(User).filter(col(User.id) == user_id).first()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


async def get_form_values(request: Request) -> dict[str, str]:
    """Text fields of a form body, then of the query string.

    The first value wins when a key repeats, so body fields take precedence
    over query parameters of the same name.
    """
    form = await request.form()
    values: dict[str, str] = {}
    for key, value in [*form.multi_items(), *request.query_params.multi_items()]:
        if isinstance(value, str) and key not in values:
            values[key] = value
    return values
