"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 에러 응답 표준: ErrorDetail, ErrorResponse
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_serializer


class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: INVALID_TOKEN, MALFORMED_INPUT)")
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")


class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - middlewares/error_handler.py에서 이 스키마로 리턴
    - DB 원본 에러나 스택트레이스는 절대 포함하지 않음
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="응답 생성 시각 (UTC)"
    )
    latency_ms: Optional[int] = Field(
        default=None, ge=0, description="요청 처리에 걸린 시간(ms). 타이밍 미들웨어와 연동 시 사용"
    )

    model_config = ConfigDict(extra="ignore")

    @field_serializer("generated_at")
    def _iso_z(self, value: datetime) -> str:
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
