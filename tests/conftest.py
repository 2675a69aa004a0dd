import os

# 앱 import 전에 DB/보안 설정을 테스트용으로 교체
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-0123456789-abcdefghijklmnop"
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ["ADMIN_USERNAMES"] = '["admin"]'

import pytest
from fastapi.testclient import TestClient

import src.models  # noqa: F401
from src.db.database import Base, SessionLocal, engine
from src.main import app
from src.services.users import register_user


@pytest.fixture
def client():
    # lifespan에서 테이블 생성 + 기본 질문 시드
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    def _make(username, password="pw"):
        return register_user(db, username, password, "127.0.0.1")
    return _make


@pytest.fixture
def login(client):
    """가입(이미 있으면 무시) 후 로그인해서 Authorization 헤더 반환"""
    def _login(username, password="pw"):
        client.post("/register", json={"username": username, "password": password})
        res = client.post("/login", json={"username": username, "password": password})
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['access_token']}"}
    return _login
