# src/services/admin.py
# 관리자: 공지 / 통계 / 유저 조회 / 질문 예약·삭제
from __future__ import annotations

import logging
from typing import List, Optional, Union

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from src.models.diary import Diary
from src.models.notice import Notice
from src.models.question import Answer, Question
from src.models.users import User
from src.schemas.schema_admin import StatsRes, UserAdminDetail, UserPublicDetail
from src.services.dates import display_date, iso_to_display_date
from src.services.errors import ValidationError
from src.services.users import get_user_by_username

logger = logging.getLogger(__name__)


# ---------- 공지 ----------
def latest_notice(db: Session) -> Optional[Notice]:
    """가장 최근에 등록된 공지 1개만 (이력은 보여주지 않음)"""
    return db.execute(select(Notice).order_by(Notice.id.desc()).limit(1)).scalars().first()


def post_notice(db: Session, content: str) -> Notice:
    if not content or not content.strip():
        raise ValidationError("공지 내용을 입력해주세요.")
    row = Notice(content=content, date=display_date())
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("공지 등록 notice_id=%s", row.id)
    return row


def delete_notice(db: Session, notice_id: int) -> bool:
    row = db.get(Notice, notice_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    logger.info("공지 삭제 notice_id=%s", notice_id)
    return True


# ---------- 통계 / 유저 ----------
def stats(db: Session) -> StatsRes:
    user_count = db.execute(select(func.count(User.id))).scalar_one()
    diary_count = db.execute(select(func.count(Diary.id))).scalar_one()
    return StatsRes(user_count=user_count, diary_count=diary_count)


def list_users(db: Session) -> List[User]:
    return db.execute(select(User).order_by(User.id.asc())).scalars().all()


def user_detail(
    db: Session,
    username: str,
    viewer_is_admin: bool,
) -> Optional[Union[UserAdminDetail, UserPublicDetail]]:
    """
    관리자: 비밀번호(해시)·IP·일기/답변 수까지 전체
    일반 유저: 표시 이름 / 소개 / 프로필 이미지만
    """
    target = get_user_by_username(db, username)
    if not target:
        return None

    if not viewer_is_admin:
        return UserPublicDetail(
            display_name=target.display_name,
            bio=target.bio,
            profile_img=target.profile_img,
        )

    diary_count = db.execute(
        select(func.count(Diary.id)).where(Diary.owner_id == target.id)
    ).scalar_one()
    answer_count = db.execute(
        select(func.count(Answer.id)).where(Answer.owner_id == target.id)
    ).scalar_one()

    return UserAdminDetail(
        id=target.id,
        username=target.username,
        display_name=target.display_name,
        bio=target.bio,
        profile_img=target.profile_img,
        created_at=target.created_at,
        ip_address=target.ip_address,
        password=target.password_hash,
        is_admin=target.is_admin,
        diary_count=diary_count,
        answer_count=answer_count,
    )


# ---------- 질문 예약 ----------
def reserve_question(db: Session, text: Optional[str], date: Optional[str]) -> Question:
    """date는 "YYYY-MM-DD"로 받아 "YYYY. MM. DD"로 저장"""
    if not text or not text.strip() or not date or not date.strip():
        raise ValidationError("내용 부족")
    try:
        formatted = iso_to_display_date(date)
    except ValueError:
        raise ValidationError("날짜 형식이 올바르지 않습니다. (YYYY-MM-DD)")

    row = Question(text=text, date=formatted)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("질문 예약 question_id=%s date=%s", row.id, row.date)
    return row


def delete_question(db: Session, question_id: int) -> bool:
    row = db.get(Question, question_id)
    if not row:
        return False

    db.execute(delete(Answer).where(Answer.question_id == question_id))
    db.delete(row)
    db.commit()
    logger.info("질문 삭제 question_id=%s", question_id)
    return True
