"""Health 라우트"""
from fastapi import APIRouter

from prompt_schema import __version__
from prompt_schema.api.dto.responses import HealthResponseDTO
from prompt_schema.api.converters import create_health_response

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponseDTO)
async def health() -> HealthResponseDTO:
    return create_health_response(__version__)
