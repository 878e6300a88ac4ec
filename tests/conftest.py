import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from config.settings import Settings
from database.db import Base, create_session_factory
from main import create_app
from models.attendance import Attendance  # noqa: F401  (테이블 등록용)
from models.grades import Grade
from models.students import Student
from models.teachers import Teacher
from utils.security import hash_password

TEACHER_EMAIL = "t@x.com"
OTHER_TEACHER_EMAIL = "otro@x.com"
PASSWORD = "correct"


@pytest.fixture()
def test_settings():
    return Settings(_env_file=None, ENV="dev", JWT_SECRET="test-secret")


@pytest.fixture()
def engine():
    # 요청 스레드와 테스트 스레드가 같은 인메모리 DB를 보도록 단일 커넥션 공유
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture()
def seed(session_factory):
    hashed = hash_password(PASSWORD, rounds=4)
    with session_factory() as db:
        db.add_all([
            Grade(id=1, nombre="1° Básico"),
            Grade(id=2, nombre="2° Básico"),
            Grade(id=3, nombre="3° Básico"),   # 학생 없는 학년
        ])
        db.add_all([
            Teacher(id=1, nombre="Ana", apellido="Rojas", email=TEACHER_EMAIL, password=hashed),
            Teacher(id=2, nombre="Luis", apellido="Soto", email=OTHER_TEACHER_EMAIL, password=hashed),
        ])
        db.add_all([
            Student(id=3, nombre="Carla", apellido="Muñoz", grado_id=1),
            Student(id=1, nombre="Diego", apellido="Pérez", grado_id=1),
            Student(id=2, nombre="Elena", apellido="Vidal", grado_id=1),
            Student(id=4, nombre="Felipe", apellido="Díaz", grado_id=2),
        ])
        db.commit()


@pytest.fixture()
def client(test_settings, engine, seed):
    app = create_app(test_settings, engine=engine)
    with TestClient(app) as c:
        yield c


def login_headers(client, email=TEACHER_EMAIL, password=PASSWORD):
    res = client.post("/api/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture()
def auth_headers(client):
    return login_headers(client)
