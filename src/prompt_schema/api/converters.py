"""Domain -> DTO 변환기"""
from prompt_schema.core import RequestError, RequestDocument, Chat, error_to_dict
from prompt_schema.api.dto.responses import (
    ErrorDetailDTO, ErrorResponseDTO, AcceptedResponseDTO, HealthResponseDTO,
)


def create_error_response(error: RequestError) -> ErrorResponseDTO:
    return ErrorResponseDTO(error=ErrorDetailDTO(**error_to_dict(error)))


def create_size_error_response(limit: int) -> ErrorResponseDTO:
    return ErrorResponseDTO(error=ErrorDetailDTO(
        code="PAYLOAD_TOO_LARGE",
        message=f"Request body exceeds {limit} bytes",
    ))


def create_accepted_response(document: RequestDocument) -> AcceptedResponseDTO:
    kind = "chat" if isinstance(document, Chat) else "completion"
    return AcceptedResponseDTO(kind=kind, request=document.to_dict())


def create_health_response(version: str) -> HealthResponseDTO:
    return HealthResponseDTO(status="healthy", version=version)
