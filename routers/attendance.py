from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import TeacherIdentity, require_teacher
from schemas.attendance import AttendanceListResponse, AttendanceMarkRequest
from services import attendance_service

router = APIRouter(prefix="/asistencia", tags=["출석"])


# ✅ [CREATE] 출석 일괄 등록 (오늘 날짜, 전부 반영 또는 전부 취소)
@router.post("/registrar")
def register_attendance(
    payload: AttendanceMarkRequest,
    teacher: TeacherIdentity = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    return attendance_service.register_attendance(db, teacher.id, payload.registros)


# ✅ [READ] 날짜별 출석 조회 (기본: 오늘, 선택: 학년 필터)
@router.get("", response_model=AttendanceListResponse)
def read_attendance(
    fecha: Optional[date] = Query(None, description="조회할 날짜 (예: 2025-03-10)"),
    grado_id: Optional[int] = Query(None, description="학년 ID"),
    _teacher: TeacherIdentity = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    return {"data": attendance_service.list_attendance(db, fecha=fecha, grado_id=grado_id)}
