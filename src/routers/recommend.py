# src/routers/recommend.py
# 추천 공간
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session

from src.auth.dependencies import ensure_claim, get_current_user
from src.db.database import get_db
from src.models.users import User
from src.schemas.schema_recommend import RecommendItem
from src.schemas.schema_user import SuccessRes
from src.services.errors import DiaryServiceError
from src.services.recommends import create_recommend, list_recommends
from src.services.uploads import to_data_uri

router = APIRouter(tags=["추천"])


@router.post("/recommend", response_model=SuccessRes)
async def post_recommend(
    content: str = Form(...),
    tag: Optional[str] = Form(None),
    user: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_claim(user, current_user)
    try:
        data_uri = await to_data_uri(image)
        create_recommend(db, current_user, content, tag=tag, image=data_uri)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()


@router.get("/recommends", response_model=List[RecommendItem])
def get_recommends(
    tag: Optional[str] = Query(None, description="all 또는 태그"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_recommends(db, tag)
