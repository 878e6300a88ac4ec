from pydantic import BaseModel

# ✅ 학년별 명단 조회 응답 (학생 + 학년 이름)
class RosterStudent(BaseModel):
    id: int                                  # 학생 ID
    nombre: str                              # 이름
    apellido: str                            # 성
    grado: str                               # 학년 표시 이름
