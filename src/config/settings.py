# src/config/settings.py
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    # DATABASE_URL이 있으면 db_* 값보다 우선 (테스트에서는 sqlite 사용)
    database_url: Optional[str] = None

    db_user: str = "root"
    db_pass: str = ""
    db_host: str = "localhost"
    db_port: int = 3306
    db_name: str = "haru_diary"

    jwt_secret_key: str = "local-dev-secret-key-change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7  # 7일

    password_hash_method: str = "pbkdf2:sha256"

    # 이 목록에 있는 아이디로 가입하면 관리자 권한 부여
    admin_usernames: List[str] = ["admin"]

    default_question_text: str = "오늘 하루 중 가장 기억에 남는 순간은?"
    welcome_bio: str = "반가워요!"
    unknown_writer_label: str = "알 수 없음"

    max_image_bytes: int = 5 * 1024 * 1024

    log_level: str = "INFO"


settings = Settings()
