from typing import Optional
from pydantic import BaseModel, Field


class CreateNoticeReq(BaseModel):
    content: str = Field(min_length=1)


class NoticeItem(BaseModel):
    id: int
    content: str
    date: str

    class Config:
        from_attributes = True


class StatsRes(BaseModel):
    user_count: int = Field(serialization_alias="userCount")
    diary_count: int = Field(serialization_alias="diaryCount")


class UserRosterItem(BaseModel):
    username: str
    display_name: str

    class Config:
        from_attributes = True


class UserPublicDetail(BaseModel):
    display_name: str
    bio: Optional[str] = None
    profile_img: Optional[str] = None


class UserAdminDetail(UserPublicDetail):
    id: int
    username: str
    created_at: str
    ip_address: Optional[str] = None
    # 관리자 화면에는 저장된 비밀번호 해시를 그대로 노출
    password: str
    is_admin: bool
    diary_count: int
    answer_count: int


class ReserveQuestionReq(BaseModel):
    # 누락 검사는 서비스에서 (ValidationError)
    text: Optional[str] = None
    date: Optional[str] = None
