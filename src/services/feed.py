# src/services/feed.py
"""
일기 피드 조립

공개 범위 필터(공개 글 + 내 글, 관리자는 전체), 기분 필터, 정렬 후
각 일기에 작성자 표시 정보 / 좋아요 수 / 내가 눌렀는지 를 붙여서 돌려준다.
작성자·좋아요 정보는 일기마다 따로 조회하지 않고 한 번에 모아서 조회한다.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from src.auth.policy import is_admin
from src.config.settings import settings
from src.models.diary import Diary, Like
from src.models.users import User
from src.schemas.schema_diary import DiaryItem

ALL_MOODS = "all"
SORT_OLDEST = "oldest"


def load_writers(db: Session, owner_ids: Iterable[int]) -> Dict[int, User]:
    """owner_id 목록 -> {id: User} (IN 쿼리 한 번)"""
    ids = {i for i in owner_ids if i is not None}
    if not ids:
        return {}
    rows = db.execute(select(User).where(User.id.in_(ids))).scalars().all()
    return {u.id: u for u in rows}


def writer_fields(writer: Optional[User]) -> dict:
    """작성자 표시 정보. 작성자를 못 찾으면 '알 수 없음' + 이미지 없음"""
    # 작성자 FK가 CASCADE라 저장소 경로로는 writer가 None이 될 수 없음 (직접 호출용 폴백)
    if writer is None:
        return {
            "user": None,
            "display_name": settings.unknown_writer_label,
            "profile_img": None,
        }
    return {
        "user": writer.username,
        "display_name": writer.display_name,
        "profile_img": writer.profile_img,
    }


def _like_counts(db: Session, diary_ids: List[int]) -> Dict[int, int]:
    rows = db.execute(
        select(Like.diary_id, func.count(Like.id))
        .where(Like.diary_id.in_(diary_ids))
        .group_by(Like.diary_id)
    ).all()
    return {diary_id: count for diary_id, count in rows}


def _liked_by(db: Session, diary_ids: List[int], user_id: int) -> Set[int]:
    rows = db.execute(
        select(Like.diary_id).where(
            Like.diary_id.in_(diary_ids),
            Like.owner_id == user_id,
        )
    ).scalars().all()
    return set(rows)


def visible_diaries_query(viewer: User, mood: Optional[str] = None, sort: Optional[str] = None):
    stmt = select(Diary)

    if mood and mood != ALL_MOODS:
        stmt = stmt.where(Diary.mood == mood)

    if not is_admin(viewer):
        stmt = stmt.where(or_(Diary.is_private == 0, Diary.owner_id == viewer.id))

    # 기본 최신순, sort=oldest면 오래된 순 (id = 생성 순서)
    if sort == SORT_OLDEST:
        return stmt.order_by(Diary.id.asc())
    return stmt.order_by(Diary.id.desc())


def list_diaries(
    db: Session,
    viewer: User,
    mood: Optional[str] = None,
    sort: Optional[str] = None,
) -> List[DiaryItem]:
    diaries = db.execute(visible_diaries_query(viewer, mood, sort)).scalars().all()
    if not diaries:
        return []

    diary_ids = [d.id for d in diaries]
    writers = load_writers(db, (d.owner_id for d in diaries))
    like_counts = _like_counts(db, diary_ids)
    liked = _liked_by(db, diary_ids, viewer.id)

    return [
        DiaryItem(
            id=d.id,
            content=d.content,
            image=d.image,
            mood=d.mood,
            is_private=d.is_private,
            date=d.date,
            like_count=like_counts.get(d.id, 0),
            is_liked=d.id in liked,
            **writer_fields(writers.get(d.owner_id)),
        )
        for d in diaries
    ]
