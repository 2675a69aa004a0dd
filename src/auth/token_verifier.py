# src/auth/token_verifier.py
# 로그인 시 발급하는 HS256 access token 생성/검증
import datetime as dt
from typing import Any, Dict, Optional

import jwt

from src.config.settings import settings
from src.models.users import User


def issue_access_token(user: User) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": str(user.id),
        "username": user.username,
        "iat": now,
        "exp": now + dt.timedelta(minutes=settings.jwt_expire_minutes),
        "token_use": "access",
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Access 토큰 검증:
    - 서명 / exp
    - token_use == "access"
    실패하면 None
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.PyJWTError:
        return None
    if payload.get("token_use") != "access":
        return None
    return payload
