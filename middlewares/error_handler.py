import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schemas.common import ErrorDetail, ErrorResponse
from utils.exceptions import AppError, MalformedInput

logger = logging.getLogger(__name__)


def _latency_ms(request: Request) -> int:
    # TimingMiddleware 가 기록한 시작 시각 기준
    started = getattr(request.state, "started_at", None)
    if started is None:
        return 0
    return int((time.perf_counter() - started) * 1000)


def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message),
        latency_ms=_latency_ms(request),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def add_error_handlers(app: FastAPI):
    # ✅ 도메인 예외 → 상태코드/에러코드 그대로
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} 실패: {exc.code}")
        return _error_response(request, exc.status_code, exc.code, exc.message)

    # ✅ 스키마 검증 실패(body/path/query) → 400 MALFORMED_INPUT
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} 입력 검증 실패: {exc.errors()}")
        return _error_response(request, MalformedInput.status_code, MalformedInput.code, MalformedInput.message)

    # ✅ 그 외 예상치 못한 예외 → 500, 내부 메시지는 로그에만 남김
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} 처리 중 예기치 못한 오류")
        return _error_response(request, 500, "INTERNAL_ERROR", "Error en el servidor")
