# src/auth/policy.py
# 권한 판단은 전부 여기서 (username 문자열 비교를 라우터에 흩뿌리지 않기)
from typing import Optional

from src.config.settings import settings
from src.models.users import User


def is_admin_username(username: str) -> bool:
    """가입 시 관리자 권한을 줄 아이디인지"""
    return username in settings.admin_usernames


def is_admin(user: Optional[User]) -> bool:
    return bool(user is not None and user.is_admin)


def claim_matches(claimed: Optional[str], user: User) -> bool:
    """
    요청 바디/경로에 실려 오는 username은 호환용일 뿐
    - 비어 있으면 통과 (토큰의 유저로 처리)
    - 값이 있으면 토큰의 유저와 같아야 함
    """
    if claimed is None or claimed == "":
        return True
    return claimed == user.username


def can_modify_diary(user: User, owner_id: int) -> bool:
    return is_admin(user) or user.id == owner_id
