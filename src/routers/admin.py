# src/routers/admin.py
# 공지 조회 + 관리자 API
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from src.auth.dependencies import get_current_user, require_admin
from src.auth.policy import is_admin
from src.db.database import get_db
from src.models.users import User
from src.schemas.schema_admin import (
    CreateNoticeReq,
    NoticeItem,
    ReserveQuestionReq,
    StatsRes,
    UserRosterItem,
)
from src.schemas.schema_user import SuccessRes
from src.services import admin as admin_service
from src.services.errors import DiaryServiceError

router = APIRouter(tags=["관리자"])


@router.get("/notices")
def get_notice(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """가장 최근 공지 1개. 없으면 {}"""
    row = admin_service.latest_notice(db)
    if not row:
        return {}
    return NoticeItem.model_validate(row)


@router.post("/admin/notice", response_model=SuccessRes)
def post_notice(
    body: CreateNoticeReq,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    try:
        admin_service.post_notice(db, body.content)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()


@router.delete("/admin/notice/{notice_id}", response_model=SuccessRes)
def delete_notice(
    notice_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    admin_service.delete_notice(db, notice_id)
    return SuccessRes()


@router.get("/admin/stats", response_model=StatsRes)
def get_stats(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """{"userCount": n, "diaryCount": n}"""
    return admin_service.stats(db)


@router.get("/admin/users", response_model=List[UserRosterItem])
def get_users(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return [UserRosterItem.model_validate(u) for u in admin_service.list_users(db)]


@router.get("/admin/user/{username}")
def get_user_detail(
    username: str,
    viewer: Optional[str] = Query(None, description="호환용, 권한은 토큰으로 판단"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    관리자: password(해시) / ip_address / diary_count / answer_count 포함 전체 \n
    일반 유저: display_name / bio / profile_img 만 \n
    없는 유저면 {}
    """
    detail = admin_service.user_detail(db, username, viewer_is_admin=is_admin(current_user))
    if detail is None:
        return {}
    return detail


@router.post("/admin/questions/reserve", response_model=SuccessRes)
def reserve_question(
    body: ReserveQuestionReq,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """date: "YYYY-MM-DD" → "YYYY. MM. DD"로 저장"""
    try:
        admin_service.reserve_question(db, body.text, body.date)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()


@router.delete("/admin/question/{question_id}", response_model=SuccessRes)
def delete_question(
    question_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    admin_service.delete_question(db, question_id)
    return SuccessRes()
