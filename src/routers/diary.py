# src/routers/diary.py
# 일기장: 피드 / 작성 / 수정 / 삭제 / 좋아요 / 댓글
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session

from src.auth.dependencies import ensure_claim, get_current_user
from src.db.database import get_db
from src.models.users import User
from src.schemas.schema_diary import (
    CommentItem,
    CreateCommentReq,
    DiaryItem,
    LikeReq,
    LikeRes,
    UpdateDiaryReq,
)
from src.schemas.schema_user import SuccessRes
from src.services.diaries import create_diary, update_diary
from src.services.engagement import add_comment, delete_diary, list_comments, toggle_like
from src.services.errors import DiaryServiceError
from src.services.feed import list_diaries
from src.services.uploads import to_data_uri

router = APIRouter(tags=["일기"])


@router.get("/diaries/{viewer}", response_model=List[DiaryItem])
def get_diaries(
    viewer: str,
    sort: Optional[str] = Query(None, description="oldest면 오래된 순"),
    mood: Optional[str] = Query(None, description="all 또는 기분 태그"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    ex) /diaries/alice?sort=oldest&mood=happy \n
    - 공개 일기 + 내 일기(비공개 포함), 관리자는 전체
    - 각 일기에 display_name / profile_img / like_count / is_liked 포함
    """
    ensure_claim(viewer, current_user)
    return list_diaries(db, current_user, mood=mood, sort=sort)


@router.post("/diary", response_model=SuccessRes)
async def post_diary(
    content: str = Form(...),
    mood: Optional[str] = Form(None),
    is_private: str = Form("0"),
    user: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_claim(user, current_user)
    try:
        data_uri = await to_data_uri(image)
        create_diary(db, current_user, content, mood=mood, is_private=is_private, image=data_uri)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()


@router.put("/diary/{diary_id}", response_model=SuccessRes)
def put_diary(
    diary_id: int,
    body: UpdateDiaryReq,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        update_diary(
            db,
            current_user,
            diary_id,
            content=body.content,
            mood=body.mood,
            is_private=body.is_private,
        )
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()


@router.delete("/diary/{diary_id}", response_model=SuccessRes)
def remove_diary(
    diary_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """일기 + 댓글 + 좋아요 삭제 (작성자 또는 관리자)"""
    try:
        delete_diary(db, current_user, diary_id)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()


@router.post("/diary/like", response_model=LikeRes)
def like_diary(
    body: LikeReq,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """좋아요 토글. liked = 토글 후 상태"""
    ensure_claim(body.user, current_user)
    try:
        liked = toggle_like(db, body.diary_id, current_user)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return LikeRes(liked=liked)


@router.get("/comments/{diary_id}", response_model=List[CommentItem])
def get_comments(
    diary_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_comments(db, diary_id)


@router.post("/comment", response_model=SuccessRes)
def post_comment(
    body: CreateCommentReq,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_claim(body.user, current_user)
    try:
        add_comment(db, body.diary_id, current_user, body.content)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()
