# src/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.settings import settings
from src.db.database import Base, SessionLocal, engine
from src.routers import admin, auth, diary, profile, question, recommend
from src.services.questions import seed_default_question

# create_all이 모든 테이블을 인식하도록 모델 import
import src.models  # noqa: F401

logging.basicConfig(level=settings.log_level, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    - 앱 시작 시 테이블 생성 (기존 테이블 컬럼 추가는 못함)
    - 질문 테이블이 비어 있으면 오늘 날짜 기본 질문 1개 생성
    """
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_default_question(db)
    finally:
        db.close()

    logger.info("서버 시작 준비 완료")
    yield
    logger.info("서버 종료")


app = FastAPI(title="Haru Diary API", lifespan=lifespan)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 프로덕션에서는 특정 도메인만 허용하도록 수정 필요
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(diary.router)
app.include_router(question.router)
app.include_router(recommend.router)
app.include_router(admin.router)


# 확인용 엔드포인트
@app.get("/")
async def root():
    return {
        "message": "Haru Diary API가 정상 작동 중입니다",
        "version": "1.0.0"
    }
