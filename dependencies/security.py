from typing import Optional, Annotated

import jwt
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from models.users import User as UserModel
from utils.security import decode_access_token

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


def get_current_user(authorization: AuthHeader = None, db: Session = Depends(get_db)) -> UserModel:
    if not authorization:
        raise _unauthorized("Missing Authorization header")

    # "Bearer <token>"
    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        raise _unauthorized("Invalid Authorization header format")

    if scheme.lower() != "bearer":
        raise _unauthorized("Invalid auth scheme")

    try:
        payload = decode_access_token(token.strip())
        user_id = int(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError):
        raise _unauthorized("Invalid token")

    user = db.query(UserModel).filter(UserModel.id == user_id).first()
    if user is None:
        raise _unauthorized("User not found")
    return user


def require_staff(user: UserModel = Depends(get_current_user)) -> UserModel:
    if user.role != "staff":
        raise HTTPException(status_code=403, detail="Staff only")
    return user


def resolve_student_id(user: UserModel, student_id: Optional[int]) -> int:
    """Students always act on themselves; staff may target any student."""
    if student_id is None or student_id == user.id:
        return user.id
    if user.role != "staff":
        raise HTTPException(status_code=403, detail="Not allowed to access another student's records")
    return student_id
