# src/models/question.py
from __future__ import annotations

from typing import List

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.database import Base


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    # "YYYY. MM. DD" 문자열이라 사전순 정렬 = 날짜순 정렬
    date: Mapped[str] = mapped_column(String(16), nullable=False, index=True)

    answers: Mapped[List["Answer"]] = relationship(
        "Answer",
        back_populates="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Answer(Base):
    __tablename__ = "answers"
    __table_args__ = (
        # 질문 하나당 유저 답변 하나 (재제출은 덮어쓰기)
        UniqueConstraint("question_id", "owner_id", name="uq_answers_question_owner"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
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

    question = relationship("Question", back_populates="answers", uselist=False)
    owner = relationship("User", back_populates="answers", uselist=False)
