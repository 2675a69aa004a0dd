# src/services/diaries.py
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from src.auth.policy import can_modify_diary
from src.models.diary import Diary
from src.models.users import User
from src.services.dates import display_date
from src.services.errors import NotFound, PermissionDenied, ValidationError

logger = logging.getLogger(__name__)


def privacy_flag(value) -> int:
    """폼으로 들어오는 "0"/"1"/True/False 등을 0/1로"""
    if isinstance(value, str):
        value = value.strip().lower()
        return 0 if value in ("", "0", "false", "off", "no") else 1
    return 1 if value else 0


def get_diary(db: Session, diary_id: int) -> Diary:
    diary = db.get(Diary, diary_id)
    if not diary:
        raise NotFound("존재하지 않는 일기입니다.")
    return diary


def create_diary(
    db: Session,
    owner: User,
    content: str,
    mood: Optional[str] = None,
    is_private=0,
    image: Optional[str] = None,
) -> Diary:
    if not content or not content.strip():
        raise ValidationError("일기 내용을 입력해주세요.")

    row = Diary(
        owner_id=owner.id,
        content=content,
        image=image,
        mood=mood,
        is_private=privacy_flag(is_private),
        date=display_date(),
    )
    db.add(row)
    db.commit()
    db.refresh(row)

    logger.info("일기 작성 diary_id=%s owner=%s private=%s", row.id, owner.username, row.is_private)
    return row


def update_diary(
    db: Session,
    user: User,
    diary_id: int,
    *,
    content: str,
    mood: Optional[str],
    is_private,
) -> Diary:
    """내용/기분/공개여부 덮어쓰기 (작성자 또는 관리자만)"""
    row = get_diary(db, diary_id)
    if not can_modify_diary(user, row.owner_id):
        raise PermissionDenied("본인 일기만 수정할 수 있습니다.")

    row.content = content
    row.mood = mood
    row.is_private = privacy_flag(is_private)
    db.commit()
    db.refresh(row)

    logger.info("일기 수정 diary_id=%s by=%s", row.id, user.username)
    return row
