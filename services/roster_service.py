import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from utils.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


def students_by_grade(db: Session, grado_id: int) -> list[dict]:
    """학년 ID로 학생 명단 조회 (학년 이름 포함, 학생 ID 순). 없으면 빈 리스트"""
    query = (
        select(
            StudentModel.id,
            StudentModel.nombre,
            StudentModel.apellido,
            GradeModel.nombre.label("grado"),
        )
        .join(GradeModel, StudentModel.grado_id == GradeModel.id)
        .where(StudentModel.grado_id == grado_id)
        .order_by(StudentModel.id)
    )
    try:
        rows = db.execute(query).all()
    except SQLAlchemyError:
        logger.exception(f"학생 명단 조회 실패: grado_id={grado_id}")
        raise PersistenceFailure("Error al obtener alumnos")

    return [
        {"id": r.id, "nombre": r.nombre, "apellido": r.apellido, "grado": r.grado}
        for r in rows
    ]
