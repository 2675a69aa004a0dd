# src/services/users.py
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.auth.passwords import hash_password, verify_password
from src.auth.policy import is_admin_username
from src.config.settings import settings
from src.models.users import User
from src.services.dates import display_datetime
from src.services.errors import DuplicateIdentity, InvalidCredential, UnknownIdentity, ValidationError

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.execute(select(User).where(User.username == username)).scalars().first()


def register_user(db: Session, username: str, password: str, ip_address: Optional[str] = None) -> User:
    """
    회원가입
    - 표시 이름 기본값 = 아이디, 기본 소개글, 프로필 이미지 없음
    - settings.admin_usernames에 있는 아이디면 관리자
    """
    if not username or not password:
        raise ValidationError("아이디와 비밀번호를 입력해주세요.")

    if get_user_by_username(db, username):
        raise DuplicateIdentity("이미 존재하는 아이디입니다.")

    user = User(
        username=username,
        password_hash=hash_password(password),
        display_name=username,
        bio=settings.welcome_bio,
        profile_img=None,
        is_admin=is_admin_username(username),
        created_at=display_datetime(),
        ip_address=ip_address,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # 동시에 같은 아이디로 가입한 경우 (uq_users_username)
        db.rollback()
        raise DuplicateIdentity("이미 존재하는 아이디입니다.")
    db.refresh(user)

    logger.info("회원가입 username=%s admin=%s", user.username, user.is_admin)
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    user = get_user_by_username(db, username)
    if not user:
        logger.info("로그인 실패(없는 아이디) username=%s", username)
        raise UnknownIdentity("아이디가 없습니다.")

    if not verify_password(user.password_hash, password):
        logger.info("로그인 실패(비밀번호 불일치) username=%s", username)
        raise InvalidCredential("비밀번호가 틀렸습니다.")

    return user


def update_profile(
    db: Session,
    user: User,
    display_name: str,
    bio: Optional[str],
    profile_img: Optional[str] = None,
) -> User:
    # 이름/소개는 항상 덮어쓰고, 이미지는 새로 올린 경우에만 교체
    user.display_name = display_name
    user.bio = bio
    if profile_img:
        user.profile_img = profile_img
    db.commit()
    db.refresh(user)
    return user
