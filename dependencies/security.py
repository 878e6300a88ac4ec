import logging
from typing import Optional, Annotated

from fastapi import Depends, Header, Request
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.db import get_db
from models.teachers import Teacher as TeacherModel
from utils.exceptions import PersistenceFailure, Unauthenticated, UnknownSubject
from utils.security import decode_token

logger = logging.getLogger(__name__)

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


class TeacherIdentity(BaseModel):
    """인증된 요청에 붙는 교사 식별 정보"""
    id: int
    email: str
    iat: Optional[int] = None
    exp: Optional[int] = None


def _extract_bearer(authorization: Optional[str]) -> str:
    if not authorization:
        raise Unauthenticated()

    # "Bearer <token>" 파싱
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthenticated()
    return token.strip()


def require_teacher(
    request: Request,
    authorization: AuthHeader = None,
    db: Session = Depends(get_db),
) -> TeacherIdentity:
    """
    보호된 라우트용 인증 게이트
    1) Bearer 토큰 추출 (없으면 401)
    2) 서명/만료 검증 (실패 시 403)
    3) 토큰의 교사 ID가 아직 DB에 존재하는지 확인 (없으면 403)
    성공하면 request.state.teacher 에도 식별 정보를 붙여 둔다.
    """
    token = _extract_bearer(authorization)
    payload = decode_token(token, request.app.state.settings)

    try:
        found = db.execute(
            select(TeacherModel.id).where(TeacherModel.id == payload["id"])
        ).scalar_one_or_none()
    except SQLAlchemyError:
        logger.exception("인증 중 교사 조회 실패")
        raise PersistenceFailure("Error en el servidor")

    if found is None:
        logger.warning(f"토큰의 교사 ID가 존재하지 않음: id={payload['id']}")
        raise UnknownSubject()

    identity = TeacherIdentity(
        id=payload["id"],
        email=payload.get("email", ""),
        iat=payload.get("iat"),
        exp=payload.get("exp"),
    )
    request.state.teacher = identity
    return identity
