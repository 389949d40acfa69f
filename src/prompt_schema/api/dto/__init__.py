"""API DTO"""
from prompt_schema.api.dto.responses import (
    ErrorDetailDTO, ErrorResponseDTO, AcceptedResponseDTO, HealthResponseDTO,
)

__all__ = ["ErrorDetailDTO", "ErrorResponseDTO", "AcceptedResponseDTO", "HealthResponseDTO"]
