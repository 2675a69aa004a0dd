# src/services/engagement.py
# 좋아요 / 댓글 / 일기 삭제(댓글·좋아요 함께)
from __future__ import annotations

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.auth.policy import can_modify_diary
from src.models.diary import Comment, Diary, Like
from src.models.users import User
from src.schemas.schema_diary import CommentItem
from src.services.dates import display_date
from src.services.diaries import get_diary
from src.services.errors import PermissionDenied, ValidationError
from src.services.feed import load_writers, writer_fields

logger = logging.getLogger(__name__)


def toggle_like(db: Session, diary_id: int, user: User) -> bool:
    """
    좋아요 토글. 반환값 = 토글 후 좋아요 상태
    - 먼저 조건부 삭제: 지워졌으면 취소(False)
    - 지울 게 없으면 추가(True)
    - 추가 중 유니크 충돌 = 동시에 다른 요청이 먼저 추가한 것 → 이미 좋아요 상태(True)
    """
    get_diary(db, diary_id)

    result = db.execute(
        delete(Like).where(Like.diary_id == diary_id, Like.owner_id == user.id)
    )
    if result.rowcount:
        db.commit()
        return False

    db.add(Like(diary_id=diary_id, owner_id=user.id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("좋아요 동시 요청 충돌 diary_id=%s user=%s", diary_id, user.username)
    return True


def add_comment(db: Session, diary_id: int, user: User, content: str) -> Comment:
    if not content or not content.strip():
        raise ValidationError("댓글 내용을 입력해주세요.")
    get_diary(db, diary_id)

    row = Comment(
        diary_id=diary_id,
        owner_id=user.id,
        content=content,
        date=display_date(),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def list_comments(db: Session, diary_id: int) -> List[CommentItem]:
    comments = db.execute(
        select(Comment).where(Comment.diary_id == diary_id).order_by(Comment.id.asc())
    ).scalars().all()
    writers = load_writers(db, (c.owner_id for c in comments))

    return [
        CommentItem(
            id=c.id,
            diary_id=c.diary_id,
            content=c.content,
            date=c.date,
            **writer_fields(writers.get(c.owner_id)),
        )
        for c in comments
    ]


def delete_diary(db: Session, user: User, diary_id: int) -> None:
    """
    일기 삭제 + 해당 일기의 댓글/좋아요 삭제
    세 삭제를 한 트랜잭션으로 커밋 (FK도 ON DELETE CASCADE)
    """
    diary = get_diary(db, diary_id)
    if not can_modify_diary(user, diary.owner_id):
        raise PermissionDenied("본인 일기만 삭제할 수 있습니다.")

    try:
        db.execute(delete(Comment).where(Comment.diary_id == diary_id))
        db.execute(delete(Like).where(Like.diary_id == diary_id))
        db.execute(delete(Diary).where(Diary.id == diary_id))
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.expire_all()
    logger.info("일기 삭제 diary_id=%s by=%s", diary_id, user.username)
