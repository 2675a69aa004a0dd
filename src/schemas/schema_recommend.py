from typing import Optional
from pydantic import BaseModel


class RecommendItem(BaseModel):
    id: int
    user: Optional[str] = None
    content: str
    image: Optional[str] = None
    tag: Optional[str] = None
    date: str
    display_name: str
    profile_img: Optional[str] = None
