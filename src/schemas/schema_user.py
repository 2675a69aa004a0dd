from typing import Optional
from pydantic import BaseModel, Field


class RegisterReq(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)


class LoginReq(BaseModel):
    username: str
    password: str


class LoginRes(BaseModel):
    success: bool = True
    username: str
    access_token: str
    token_type: str = "bearer"


class SuccessRes(BaseModel):
    success: bool = True


class UserInfo(BaseModel):
    id: int
    username: str
    display_name: str
    bio: Optional[str] = None
    profile_img: Optional[str] = None
    created_at: str

    class Config:
        from_attributes = True
