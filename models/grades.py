from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

class Grade(Base):
    __tablename__ = "Grados"  # 학년(반) 테이블

    id = Column(Integer, primary_key=True, index=True)     # 학년 고유 ID (PK)
    nombre = Column(String(100), nullable=False)           # 표시 이름 (예: 3° Básico)

    # ✅ 이 학년에 속한 학생들 (1:N)
    students = relationship("Student", back_populates="grade")
