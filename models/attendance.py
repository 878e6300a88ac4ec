from sqlalchemy import Column, Date, ForeignKey, Integer, String, UniqueConstraint
from database.db import Base

class Attendance(Base):
    __tablename__ = "Asistencia"  # 출결 기록 테이블
    # (학생, 날짜) 당 한 건만 존재 → upsert 키
    __table_args__ = (
        UniqueConstraint("alumno_id", "fecha", name="uq_asistencia_alumno_fecha"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)                    # 출결 고유 ID (PK)
    alumno_id = Column(Integer, ForeignKey("Alumnos.id"), nullable=False)         # 학생 ID
    profesor_id = Column(Integer, ForeignKey("Profesores.id"), nullable=False)    # 기록한 교사 ID
    fecha = Column(Date, nullable=False)                                          # 날짜
    estado = Column(String(20), nullable=False)                                   # 출결 상태 (예: presente, ausente, tarde, justificado)
