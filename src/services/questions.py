# src/services/questions.py
# 오늘의 질문 / 답변
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config.settings import settings
from src.models.question import Answer, Question
from src.models.users import User
from src.schemas.schema_question import AnswerItem, QuestionHistoryItem
from src.services.dates import display_date
from src.services.errors import NotFound, StorageConstraintViolation, ValidationError
from src.services.feed import load_writers, writer_fields

logger = logging.getLogger(__name__)

MAX_RETRY = 3


def seed_default_question(db: Session) -> Optional[Question]:
    """질문 테이블이 비어 있으면 오늘 날짜로 기본 질문 1개 생성"""
    count = db.execute(select(func.count(Question.id))).scalar_one()
    if count:
        return None

    row = Question(text=settings.default_question_text, date=display_date())
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("기본 질문 생성 question_id=%s date=%s", row.id, row.date)
    return row


def _newest_first():
    return select(Question).order_by(Question.date.desc(), Question.id.desc())


def list_questions(db: Session) -> List[Question]:
    return db.execute(_newest_first()).scalars().all()


def current_question(db: Session) -> Optional[Question]:
    """오늘(KST) 이전 날짜 중 가장 최근 질문. 예약된 미래 질문은 제외"""
    stmt = _newest_first().where(Question.date <= display_date()).limit(1)
    return db.execute(stmt).scalars().first()


def get_question(db: Session, question_id: int) -> Question:
    row = db.get(Question, question_id)
    if not row:
        raise NotFound("존재하지 않는 질문입니다.")
    return row


def answer_history(db: Session, user: User) -> List[QuestionHistoryItem]:
    """전체 질문 + 내 답변 (없으면 None). 다른 사람 답변은 포함하지 않음"""
    questions = list_questions(db)
    mine = db.execute(
        select(Answer.question_id, Answer.content).where(Answer.owner_id == user.id)
    ).all()
    my_answers = {question_id: content for question_id, content in mine}

    return [
        QuestionHistoryItem(
            q_id=q.id,
            q_text=q.text,
            q_date=q.date,
            my_answer=my_answers.get(q.id),
        )
        for q in questions
    ]


def _find_answer(db: Session, question_id: int, owner_id: int) -> Optional[Answer]:
    return db.execute(
        select(Answer).where(
            Answer.question_id == question_id,
            Answer.owner_id == owner_id,
        )
    ).scalars().first()


def submit_answer(db: Session, question_id: int, user: User, content: str) -> Answer:
    """
    (질문, 유저) 기준 upsert
    - 있으면 내용/날짜 덮어쓰기, 없으면 생성
    - 동시 제출로 유니크 충돌이 나면 rollback 후 다시 찾아서 수정
    """
    if content is None or not content.strip():
        raise ValidationError("답변 내용을 입력해주세요.")
    get_question(db, question_id)

    for _ in range(MAX_RETRY):
        row = _find_answer(db, question_id, user.id)
        if row:
            row.content = content
            row.date = display_date()
        else:
            row = Answer(
                question_id=question_id,
                owner_id=user.id,
                content=content,
                date=display_date(),
            )
            db.add(row)
        try:
            db.commit()
            db.refresh(row)
            return row
        except IntegrityError:
            db.rollback()
            logger.warning("답변 동시 제출 충돌 question_id=%s user=%s", question_id, user.username)
            continue
    raise StorageConstraintViolation("답변 저장 실패 (재시도 초과)")


def list_answers(db: Session, question_id: int) -> List[AnswerItem]:
    answers = db.execute(
        select(Answer).where(Answer.question_id == question_id).order_by(Answer.id.asc())
    ).scalars().all()
    writers = load_writers(db, (a.owner_id for a in answers))

    return [
        AnswerItem(
            id=a.id,
            question_id=a.question_id,
            content=a.content,
            date=a.date,
            **writer_fields(writers.get(a.owner_id)),
        )
        for a in answers
    ]
