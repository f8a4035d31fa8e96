from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlmodel import col

from ..auth.jwt import create_access_token
from ..auth.passwords import verify_password
from ..models import User
from ..schemas.auth import TokenResponse


def login(
    *,
    username: str,
    password: str,
    db: Session,
) -> TokenResponse:
    user = db.query(User).filter(col(User.username) == username).first()

    if user is None or not verify_password(password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(user.id)
    return TokenResponse(access_token=token)
