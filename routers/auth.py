from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import TeacherIdentity, require_teacher
from schemas.auth import LoginRequest, LoginResponse, VerifyResponse
from services import auth_service

router = APIRouter(prefix="/auth", tags=["인증"])


# ✅ [LOGIN] 로그인 API (body 없이 와도 MissingCredentials 로 처리)
@router.post("/login", response_model=LoginResponse)
def login(
    request: Request,
    payload: LoginRequest = Body(default_factory=LoginRequest),
    db: Session = Depends(get_db),
):
    return auth_service.login(db, payload.email, payload.password, request.app.state.settings)


# ✅ [VERIFY] 토큰 유효성 확인
@router.get("/verify", response_model=VerifyResponse)
def verify(teacher: TeacherIdentity = Depends(require_teacher)):
    return {"valid": True, "user": teacher.model_dump()}
