from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List
from datetime import date

# ✅ 출석 한 건 (학생 ID + 상태)
#    - 학생 ID는 "alumnoId" 또는 "id" 키 모두 허용
class AttendanceEntry(BaseModel):
    alumnoId: int = Field(..., gt=0, validation_alias=AliasChoices("alumnoId", "id"))
    estado: str = Field(..., min_length=1, max_length=20)   # 예: presente, ausente, tarde, justificado

    model_config = ConfigDict(str_strip_whitespace=True)

# ✅ 출석 일괄 등록 요청
class AttendanceMarkRequest(BaseModel):
    registros: List[AttendanceEntry]

# ✅ 출석 조회 응답 한 줄
class AttendanceRecord(BaseModel):
    alumnoId: int
    nombre: str
    apellido: str
    grado: str
    fecha: date
    estado: str
    profesorId: int

class AttendanceListResponse(BaseModel):
    data: List[AttendanceRecord]
