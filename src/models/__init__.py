# src/models/__init__.py
from src.models.users import User
from src.models.diary import Diary, Comment, Like
from src.models.question import Question, Answer
from src.models.notice import Notice
from src.models.recommend import Recommend
