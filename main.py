from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from config.settings import Settings, settings as default_settings
from database.db import create_db_engine, create_session_factory

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import attendance, auth, students

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    애플리케이션 생성
    - settings: 생략 시 .env/환경변수 기반 기본 설정
    - engine: 외부에서 만든 엔진 주입 (테스트용). 생략 시 기동 시점에 커넥션 풀 생성, 종료 시 해제
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_engine = engine is None
        db_engine = create_db_engine(settings) if owns_engine else engine
        app.state.engine = db_engine
        app.state.session_factory = create_session_factory(db_engine)

        if settings.ENV == "prod" and settings.uses_default_secret:
            logger.warning("JWT_SECRET 이 기본값입니다. 운영 환경에서는 반드시 변경하세요")
        logger.info(f"{settings.APP_TITLE} 기동 (env={settings.ENV}, db={settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME})")
        try:
            yield
        finally:
            if owns_engine:
                db_engine.dispose()
            logger.info("커넥션 풀 해제 완료")

    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ✅ CORS 설정 (정적 프론트엔드 연동)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    # ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
    app.add_middleware(TimingMiddleware)

    # ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
    add_error_handlers(app)

    # ✅ /api 프리픽스 라우터 등록
    app.include_router(auth.router,        prefix="/api")
    app.include_router(attendance.router,  prefix="/api")
    app.include_router(students.router,    prefix="/api")

    # ✅ 헬스체크 엔드포인트
    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": "API is running"}

    return app


logging.basicConfig(level=default_settings.LOG_LEVEL)

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
