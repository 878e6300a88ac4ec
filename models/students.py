from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

class Student(Base):
    __tablename__ = "Alumnos"  # 학생 기본 정보 테이블 (읽기 전용)

    id = Column(Integer, primary_key=True, index=True)                      # 학생 고유 ID (PK)
    nombre = Column(String(100), nullable=False)                            # 이름
    apellido = Column(String(100), nullable=False)                          # 성
    grado_id = Column(Integer, ForeignKey("Grados.id"), nullable=False)     # 소속 학년 ID (FK)

    # ✅ 소속 학년 (N:1)
    grade = relationship("Grade", back_populates="students")
