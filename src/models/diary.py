# src/models/diary.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import ForeignKey, Index, Integer, SmallInteger, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.database import Base
from src.models.users import ImageText


class Diary(Base):
    __tablename__ = "diaries"

    # 피드 정렬은 date가 아니라 id(생성 순서) 기준
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[Optional[str]] = mapped_column(ImageText, nullable=True)
    mood: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # 0 = 공개, 1 = 비공개 (boolean 아님)
    is_private: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    # 화면 표시용 "YYYY. MM. DD"
    date: Mapped[str] = mapped_column(String(16), nullable=False)

    __table_args__ = (
        Index("idx_diaries_private_owner", "is_private", "owner_id"),
        Index("idx_diaries_mood", "mood"),
    )

    owner = relationship("User", back_populates="diaries", uselist=False)

    comments: Mapped[List["Comment"]] = relationship(
        "Comment",
        back_populates="diary",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    likes: Mapped[List["Like"]] = relationship(
        "Like",
        back_populates="diary",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    diary_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("diaries.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(16), nullable=False)

    diary = relationship("Diary", back_populates="comments", uselist=False)


class Like(Base):
    __tablename__ = "likes"
    __table_args__ = (
        # 한 유저는 한 일기에 좋아요 한 번만
        UniqueConstraint("diary_id", "owner_id", name="uq_likes_diary_owner"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    diary_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("diaries.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    diary = relationship("Diary", back_populates="likes", uselist=False)
