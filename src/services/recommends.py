# src/services/recommends.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.models.recommend import Recommend
from src.models.users import User
from src.schemas.schema_recommend import RecommendItem
from src.services.dates import display_date
from src.services.errors import ValidationError
from src.services.feed import load_writers, writer_fields

ALL_TAGS = "all"


def create_recommend(
    db: Session,
    owner: User,
    content: str,
    tag: Optional[str] = None,
    image: Optional[str] = None,
) -> Recommend:
    if not content or not content.strip():
        raise ValidationError("추천 내용을 입력해주세요.")

    row = Recommend(
        owner_id=owner.id,
        content=content,
        image=image,
        tag=tag,
        date=display_date(),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def list_recommends(db: Session, tag: Optional[str] = None) -> List[RecommendItem]:
    stmt = select(Recommend)
    if tag and tag != ALL_TAGS:
        stmt = stmt.where(Recommend.tag == tag)
    rows = db.execute(stmt.order_by(Recommend.id.desc())).scalars().all()
    writers = load_writers(db, (r.owner_id for r in rows))

    return [
        RecommendItem(
            id=r.id,
            content=r.content,
            image=r.image,
            tag=r.tag,
            date=r.date,
            **writer_fields(writers.get(r.owner_id)),
        )
        for r in rows
    ]
