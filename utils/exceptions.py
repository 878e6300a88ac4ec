"""
utils/exceptions.py

- 애플리케이션 전반에서 쓰는 도메인 예외 모음
- 각 예외는 HTTP 상태코드/에러코드/기본 메시지를 들고 다니며,
  middlewares/error_handler.py 에서 일관된 JSON 에러 응답으로 변환됩니다.
"""

from typing import Optional


class AppError(Exception):
    """모든 도메인 예외의 기반 클래스"""

    status_code = 500
    code = "INTERNAL_ERROR"
    message = "Error en el servidor"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# =========================================================
# 인증/인가
# =========================================================

class Unauthenticated(AppError):
    """Authorization 헤더에 토큰이 없음"""
    status_code = 401
    code = "UNAUTHENTICATED"
    message = "Token requerido"


class InvalidToken(AppError):
    """서명 불일치, 만료, 형식 오류"""
    status_code = 403
    code = "INVALID_TOKEN"
    message = "Token inválido"


class UnknownSubject(AppError):
    """토큰은 유효하지만 해당 교사가 더 이상 존재하지 않음"""
    status_code = 403
    code = "UNKNOWN_SUBJECT"
    message = "Token inválido"


class MissingCredentials(AppError):
    status_code = 400
    code = "MISSING_CREDENTIALS"
    message = "Email y contraseña requeridos"


class InvalidCredentials(AppError):
    # 이메일 없음 / 비밀번호 불일치 모두 동일한 응답
    status_code = 401
    code = "INVALID_CREDENTIALS"
    message = "Credenciales inválidas"


# =========================================================
# 입력/저장
# =========================================================

class MalformedInput(AppError):
    status_code = 400
    code = "MALFORMED_INPUT"
    message = "Datos inválidos"


class PersistenceFailure(AppError):
    """DB 오류. 트랜잭션은 이미 롤백된 상태로 던져짐"""
    status_code = 500
    code = "PERSISTENCE_FAILURE"
    message = "Error al guardar los datos"
