from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import TeacherIdentity, require_teacher
from schemas.students import RosterStudent
from services import roster_service

router = APIRouter(prefix="/alumnos", tags=["학생 정보"])


# ✅ [READ] 특정 학년의 학생 목록 조회 (학생이 없으면 빈 배열)
@router.get("/grado/{grado_id}", response_model=List[RosterStudent])
def get_students_by_grade(
    grado_id: int,
    _teacher: TeacherIdentity = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    return roster_service.students_by_grade(db, grado_id)
