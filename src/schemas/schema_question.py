from typing import Optional
from pydantic import BaseModel


class QuestionItem(BaseModel):
    id: int
    text: str
    date: str

    class Config:
        from_attributes = True


class QuestionHistoryItem(BaseModel):
    q_id: int
    q_text: str
    q_date: str
    # 답변이 없으면 null
    my_answer: Optional[str] = None


class SubmitAnswerReq(BaseModel):
    question_id: int
    user: Optional[str] = None
    content: str


class AnswerItem(BaseModel):
    id: int
    question_id: int
    user: Optional[str] = None
    content: str
    date: str
    display_name: str
    profile_img: Optional[str] = None
