from typing import Optional
from pydantic import BaseModel, Field, field_validator


class UpdateDiaryReq(BaseModel):
    content: str = Field(min_length=1)
    mood: Optional[str] = None
    is_private: int = 0

    @field_validator("is_private")
    @classmethod
    def privacy_flag(cls, v):
        if v not in (0, 1):
            raise ValueError("is_private는 0 또는 1이어야 합니다.")
        return v


class DiaryItem(BaseModel):
    id: int
    user: Optional[str] = None
    content: str
    image: Optional[str] = None
    mood: Optional[str] = None
    is_private: int
    date: str
    display_name: str
    profile_img: Optional[str] = None
    like_count: int
    is_liked: bool


class LikeReq(BaseModel):
    diary_id: int
    user: Optional[str] = None


class LikeRes(BaseModel):
    liked: bool


class CreateCommentReq(BaseModel):
    diary_id: int
    user: Optional[str] = None
    content: str


class CommentItem(BaseModel):
    id: int
    diary_id: int
    user: Optional[str] = None
    content: str
    date: str
    display_name: str
    profile_img: Optional[str] = None
