from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine                # SQLAlchemy 엔진 생성 도구
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from config.settings import Settings

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ✅ 설정값으로 커넥션 풀이 달린 엔진 생성
#    - pool_size 만큼만 동시 연결, max_overflow=0 → 초과 요청은 대기열에서 기다림
def create_db_engine(settings: Settings) -> Engine:
    return create_engine(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ✅ 요청마다 세션 하나를 열고, 응답 후 반드시 닫아 커넥션을 풀에 반납
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
