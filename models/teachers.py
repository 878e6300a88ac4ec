from sqlalchemy import Column, Integer, String
from database.db import Base

class Teacher(Base):
    __tablename__ = "Profesores"  # 교사 계정 테이블 (시스템 외부에서 생성됨)

    id = Column(Integer, primary_key=True, index=True)          # 교사 고유 ID (PK)
    nombre = Column(String(100), nullable=False)                # 이름
    apellido = Column(String(100), nullable=False)              # 성
    email = Column(String(150), unique=True, nullable=False)    # 로그인 이메일
    password = Column(String(255), nullable=False)              # bcrypt 해시

    @property
    def full_name(self) -> str:
        return f"{self.nombre} {self.apellido}"
