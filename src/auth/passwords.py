from werkzeug.security import check_password_hash, generate_password_hash

from src.config.settings import settings


def hash_password(password: str) -> str:
    return generate_password_hash(password, method=settings.password_hash_method)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)
