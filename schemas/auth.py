from pydantic import BaseModel
from typing import Optional

# ✅ 로그인 요청 형식
#    - 빈 값 검사는 서비스에서 MissingCredentials 로 처리하므로 기본값 허용
class LoginRequest(BaseModel):
    email: Optional[str] = None              # 교사 이메일
    password: Optional[str] = None           # 평문 비밀번호

# ✅ 로그인 응답 형식
class LoginResponse(BaseModel):
    token: str                               # Bearer 토큰 (8시간 유효)
    nombre: str                              # 표시 이름 ("이름 성")
    id: int                                  # 교사 ID

# ✅ 토큰 검증 응답 형식
class VerifiedUser(BaseModel):
    id: int
    email: str
    iat: Optional[int] = None                # 발급 시각 (epoch seconds)
    exp: Optional[int] = None                # 만료 시각 (epoch seconds)

class VerifyResponse(BaseModel):
    valid: bool
    user: VerifiedUser
