"""응답 DTO"""
from typing import Any, Literal
from pydantic import BaseModel


class ErrorDetailDTO(BaseModel):
    """에러 상세 DTO (경로 + 사유)"""
    code: str
    message: str
    path: str | None = None
    expected: str | None = None
    actual: str | None = None
    line: int | None = None
    column: int | None = None
    position: int | None = None


class ErrorResponseDTO(BaseModel):
    """에러 응답 DTO"""
    error: ErrorDetailDTO


class AcceptedResponseDTO(BaseModel):
    """검증 통과 응답 DTO (정규화된 요청 문서)"""
    kind: Literal["chat", "completion"]
    request: dict[str, Any]


class HealthResponseDTO(BaseModel):
    """헬스체크 응답 DTO"""
    status: Literal["healthy", "unhealthy"]
    version: str
