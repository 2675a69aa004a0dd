# 프로필 관련 API 엔드포인트 (사용자 정보 조회 / 수정)
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from src.auth.dependencies import ensure_claim, get_current_user
from src.db.database import get_db
from src.models.users import User
from src.schemas.schema_user import SuccessRes, UserInfo
from src.services.errors import DiaryServiceError
from src.services.uploads import to_data_uri
from src.services.users import get_user_by_username, update_profile

router = APIRouter(tags=["프로필"])


@router.get("/user/info/{username}")
def get_user_info(
    username: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """비밀번호/IP를 뺀 프로필. 없는 유저면 {}"""
    user = get_user_by_username(db, username)
    if not user:
        return {}
    return UserInfo.model_validate(user)


@router.post("/profile/update", response_model=SuccessRes)
async def update_my_profile(
    display_name: str = Form(...),
    bio: str = Form(""),
    username: Optional[str] = Form(None),
    profile_img: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    multipart/form-data
    - display_name, bio: 항상 덮어씀
    - profile_img: 새 파일을 올린 경우에만 교체
    """
    ensure_claim(username, current_user)
    try:
        image = await to_data_uri(profile_img)
        update_profile(db, current_user, display_name, bio, image)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()
