import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from config.settings import Settings
from utils.exceptions import InvalidToken

logger = logging.getLogger(__name__)


# ==========================================================
# [1] 비밀번호 (bcrypt)
# ==========================================================

def hash_password(plain: str, rounds: Optional[int] = None) -> str:
    salt = bcrypt.gensalt(rounds) if rounds else bcrypt.gensalt()
    return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """저장된 해시와 비교. 해시 형식이 깨져 있으면 불일치로 취급"""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("저장된 비밀번호 해시 형식이 올바르지 않음")
        return False


# ==========================================================
# [2] 세션 토큰 (JWT, HS256)
# ==========================================================

def issue_token(teacher_id: int, email: str, settings: Settings, now: Optional[datetime] = None) -> str:
    """
    교사 식별 정보를 담은 서명 토큰 발급
    - payload: id, email, iat, exp
    - 만료: 발급 시각 + TOKEN_TTL_HOURS (기본 8시간)
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "id": teacher_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=settings.TOKEN_TTL_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("만료된 토큰")
        raise InvalidToken()
    except jwt.InvalidTokenError as e:
        logger.warning(f"토큰 검증 실패: {e}")
        raise InvalidToken()

    if not isinstance(payload.get("id"), int):
        raise InvalidToken()
    return payload
