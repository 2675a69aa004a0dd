# 인증 관련 API 엔드포인트 (회원가입 / 로그인 / 로그아웃)
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from src.auth.dependencies import get_current_user
from src.auth.token_verifier import issue_access_token
from src.db.database import get_db
from src.models.users import User
from src.schemas.schema_user import LoginReq, LoginRes, RegisterReq, SuccessRes
from src.services.errors import DiaryServiceError
from src.services.users import authenticate, register_user

router = APIRouter(tags=["인증"])


def client_ip(request: Request) -> Optional[str]:
    # 프록시를 거치면 "client, proxy1, proxy2" 형태라 첫 번째 값 사용
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


@router.post("/register", response_model=SuccessRes)
def register(body: RegisterReq, request: Request, db: Session = Depends(get_db)):
    """
    회원가입
    - 이미 있는 아이디: 400 "이미 존재하는 아이디입니다."
    """
    try:
        register_user(db, body.username, body.password, client_ip(request))
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessRes()


@router.post("/login", response_model=LoginRes)
def login(body: LoginReq, db: Session = Depends(get_db)):
    """
    로그인
    - 성공 시 access_token 발급. 이후 요청은 Authorization: Bearer <access_token>
    - 없는 아이디 404, 비밀번호 불일치 401
    """
    try:
        user = authenticate(db, body.username, body.password)
    except DiaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return LoginRes(username=user.username, access_token=issue_access_token(user))


@router.post("/logout", status_code=status.HTTP_200_OK)
def logout(current_user: User = Depends(get_current_user)):
    """
    서버는 세션을 저장하지 않음 (stateless JWT)
    토큰 유효성만 확인하고, 실제 로그아웃은 클라이언트가 토큰을 버리는 것
    """
    return {"message": "로그아웃 되었습니다. 클라이언트에서 토큰을 삭제해주세요."}
