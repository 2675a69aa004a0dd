# src/routers/question.py
# 오늘의 질문 / 답변
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from src.auth.dependencies import ensure_claim, get_current_user
from src.db.database import get_db
from src.models.users import User
from src.schemas.schema_question import AnswerItem, QuestionHistoryItem, QuestionItem, SubmitAnswerReq
from src.schemas.schema_user import SuccessRes
from src.services.errors import DiaryServiceError
from src.services.questions import (
    answer_history,
    current_question,
    list_answers,
    list_questions,
    submit_answer,
)

router = APIRouter(tags=["질문"])


@router.get("/questions", response_model=List[QuestionItem])
def get_questions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """전체 질문, 날짜 최신순"""
    return [QuestionItem.model_validate(q) for q in list_questions(db)]


@router.get("/questions/today")
def get_today_question(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """오늘 기준 가장 최근 질문. 없으면 {}"""
    row = current_question(db)
    if not row:
        return {}
    return QuestionItem.model_validate(row)


@router.get("/questions/history/{username}", response_model=List[QuestionHistoryItem])
def get_question_history(
    username: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    전체 질문 + 내 답변 \n
    my_answer: 답변 안 한 질문이면 null
    """
    ensure_claim(username, current_user)
    return answer_history(db, current_user)


@router.get("/answers/{question_id}", response_model=List[AnswerItem])
def get_answers(
    question_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_answers(db, question_id)


@router.post("/answer", response_model=SuccessRes)
def post_answer(
    body: SubmitAnswerReq,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """이미 답변한 질문이면 내용/날짜 덮어쓰기"""
    ensure_claim(body.user, current_user)
    try:
        submit_answer(db, body.question_id, current_user, body.content)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()
