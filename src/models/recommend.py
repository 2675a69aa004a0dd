# src/models/recommend.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.db.database import Base
from src.models.users import ImageText


class Recommend(Base):
    __tablename__ = "recommends"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[Optional[str]] = mapped_column(ImageText, nullable=True)
    tag: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    date: Mapped[str] = mapped_column(String(16), nullable=False)
