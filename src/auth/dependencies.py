# src/auth/dependencies.py
from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.auth.policy import claim_matches, is_admin
from src.auth.token_verifier import verify_access_token
from src.db.database import get_db
from src.models.users import User


bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    bearer: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> User:

    # Authorization: Bearer <token> 우선, 없으면 헤더 직접 확인
    if bearer and getattr(bearer, "scheme", "").lower() == "bearer":
        access_token = bearer.credentials
    else:
        auth = request.headers.get("Authorization")
        if not auth or not auth.startswith("Bearer "):
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "인증 헤더 없음")
        access_token = auth.replace("Bearer ", "", 1).strip()

    payload = verify_access_token(access_token)
    if payload is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "유효하지 않은 access_token")

    sub = payload.get("sub")
    if not sub or not str(sub).isdigit():
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "access_token에 sub 없음")

    user = db.get(User, int(sub))
    if not user:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "가입되지 않은 사용자")

    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not is_admin(current_user):
        raise HTTPException(status.HTTP_403_FORBIDDEN, "관리자만 사용할 수 있습니다.")
    return current_user


def ensure_claim(claimed: Optional[str], current_user: User) -> None:
    """요청에 실린 username이 로그인한 유저와 다르면 403"""
    if not claim_matches(claimed, current_user):
        raise HTTPException(status.HTTP_403_FORBIDDEN, "다른 사용자로 요청할 수 없습니다.")
