"""
services/attendance_service.py

- 출석 일괄 등록(upsert)과 날짜별 출석 조회
- 한 번의 호출 = 한 트랜잭션: 전부 반영되거나, 하나라도 실패하면 전부 롤백
- (학생, 날짜) 키가 겹치면 나중에 쓴 값이 이김 (같은 배치 안에서도 동일)
"""

import logging
from datetime import date
from collections.abc import Sequence
from typing import Any, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.attendance import Attendance as AttendanceModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from schemas.attendance import AttendanceEntry
from utils.exceptions import MalformedInput, PersistenceFailure

logger = logging.getLogger(__name__)


# ==========================================================
# [공통] 입력 정규화
# ==========================================================
def _normalize_entries(entries: Any) -> list[AttendanceEntry]:
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        raise MalformedInput()

    normalized = []
    for entry in entries:
        if isinstance(entry, AttendanceEntry):
            normalized.append(entry)
            continue
        try:
            normalized.append(AttendanceEntry.model_validate(entry))
        except ValidationError:
            raise MalformedInput("Datos incompletos")
    return normalized


# ==========================================================
# [공통] DB 방언별 upsert 문장
# ==========================================================
def _upsert_statement(dialect_name: str, values: dict):
    """
    (alumno_id, fecha) 유니크 키 기준 insert-or-update
    - MySQL: INSERT ... ON DUPLICATE KEY UPDATE
    - SQLite/PostgreSQL: INSERT ... ON CONFLICT DO UPDATE
    상태와 기록 교사를 함께 덮어씀
    """
    if dialect_name in ("mysql", "mariadb"):
        stmt = mysql.insert(AttendanceModel).values(**values)
        return stmt.on_duplicate_key_update(
            estado=stmt.inserted.estado,
            profesor_id=stmt.inserted.profesor_id,
        )

    if dialect_name == "sqlite":
        stmt = sqlite.insert(AttendanceModel).values(**values)
    elif dialect_name == "postgresql":
        stmt = postgresql.insert(AttendanceModel).values(**values)
    else:
        logger.error(f"upsert 미지원 DB: {dialect_name}")
        raise PersistenceFailure("Error al guardar asistencia")

    return stmt.on_conflict_do_update(
        index_elements=["alumno_id", "fecha"],
        set_={"estado": stmt.excluded.estado, "profesor_id": stmt.excluded.profesor_id},
    )


# ==========================================================
# [1] 출석 일괄 등록
# ==========================================================
def register_attendance(
    db: Session,
    teacher_id: int,
    entries: Any,
    today: Optional[date] = None,
) -> dict:
    """
    인증된 교사가 학생들의 오늘 출석 상태를 일괄 기록
    - entries: [{alumnoId|id, estado}, ...] 또는 AttendanceEntry 리스트
    - 형식 오류가 하나라도 있으면 아무것도 쓰지 않고 MalformedInput
    - 날짜는 배치 전체에 대해 한 번만 계산 (서버 로컬 날짜)
    """
    normalized = _normalize_entries(entries)
    fecha = today or date.today()
    dialect_name = db.get_bind().dialect.name

    try:
        for entry in normalized:
            db.execute(_upsert_statement(dialect_name, {
                "alumno_id": entry.alumnoId,
                "profesor_id": teacher_id,
                "fecha": fecha,
                "estado": entry.estado,
            }))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"출석 저장 실패, 롤백: teacher_id={teacher_id}, fecha={fecha}, 건수={len(normalized)}")
        raise PersistenceFailure("Error al guardar asistencia")

    logger.info(f"출석 저장 완료: teacher_id={teacher_id}, fecha={fecha}, 건수={len(normalized)}")
    return {"success": True}


# ==========================================================
# [2] 출석 조회 (날짜 + 선택적 학년 필터)
# ==========================================================
def list_attendance(
    db: Session,
    fecha: Optional[date] = None,
    grado_id: Optional[int] = None,
) -> list[dict]:
    target = fecha or date.today()
    query = (
        select(
            AttendanceModel.alumno_id,
            StudentModel.nombre,
            StudentModel.apellido,
            GradeModel.nombre.label("grado"),
            AttendanceModel.fecha,
            AttendanceModel.estado,
            AttendanceModel.profesor_id,
        )
        .join(StudentModel, AttendanceModel.alumno_id == StudentModel.id)
        .join(GradeModel, StudentModel.grado_id == GradeModel.id)
        .where(AttendanceModel.fecha == target)
    )
    if grado_id is not None:
        query = query.where(StudentModel.grado_id == grado_id)

    try:
        rows = db.execute(query.order_by(AttendanceModel.alumno_id)).all()
    except SQLAlchemyError:
        logger.exception(f"출석 조회 실패: fecha={target}, grado_id={grado_id}")
        raise PersistenceFailure("Error al obtener asistencia")

    return [
        {
            "alumnoId": r.alumno_id,
            "nombre": r.nombre,
            "apellido": r.apellido,
            "grado": r.grado,
            "fecha": r.fecha,
            "estado": r.estado,
            "profesorId": r.profesor_id,
        }
        for r in rows
    ]
