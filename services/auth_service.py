import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.settings import Settings
from models.teachers import Teacher as TeacherModel
from utils.exceptions import InvalidCredentials, MissingCredentials, PersistenceFailure
from utils.security import issue_token, verify_password

logger = logging.getLogger(__name__)


def login(db: Session, email: Optional[str], password: Optional[str], settings: Settings) -> dict:
    """
    이메일/비밀번호로 교사 로그인
    - 둘 중 하나라도 비어 있으면 MissingCredentials
    - 이메일 없음 / 비밀번호 불일치 는 구분하지 않고 같은 InvalidCredentials
    - 성공 시 {token, nombre, id}
    """
    email = (email or "").strip()
    if not email or not password:
        raise MissingCredentials()

    try:
        teacher = db.execute(
            select(TeacherModel).where(TeacherModel.email == email)
        ).scalar_one_or_none()
    except SQLAlchemyError:
        logger.exception("로그인 중 교사 조회 실패")
        raise PersistenceFailure("Error en el servidor")

    if teacher is None or not verify_password(password, teacher.password):
        logger.warning(f"로그인 실패: email={email}")
        raise InvalidCredentials()

    token = issue_token(teacher.id, teacher.email, settings)
    logger.info(f"로그인 성공: teacher_id={teacher.id}")
    return {
        "token": token,
        "nombre": teacher.full_name,
        "id": teacher.id,
    }
