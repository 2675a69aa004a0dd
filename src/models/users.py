# src/models/users.py
from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Boolean, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.mysql import LONGTEXT
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.database import Base

if TYPE_CHECKING:
    from src.models.diary import Diary
    from src.models.question import Answer

# base64 이미지가 통째로 들어가므로 MySQL에서는 LONGTEXT
ImageText = Text().with_variant(LONGTEXT(), "mysql")


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
    )

    # 다른 테이블은 username이 아닌 이 id로 연결됨
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    display_name: Mapped[str] = mapped_column(String(120), nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    profile_img: Mapped[Optional[str]] = mapped_column(ImageText, nullable=True)

    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # "YYYY-MM-DD HH:MM:SS" (KST)
    created_at: Mapped[str] = mapped_column(String(19), nullable=False)
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    diaries: Mapped[List["Diary"]] = relationship(
        "Diary",
        back_populates="owner",
        passive_deletes=True,
    )

    answers: Mapped[List["Answer"]] = relationship(
        "Answer",
        back_populates="owner",
        passive_deletes=True,
    )
