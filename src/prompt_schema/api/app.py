"""FastAPI 애플리케이션 팩토리"""
from pathlib import Path

from fastapi import FastAPI

from prompt_schema import __version__
from prompt_schema.core import AppConfig, Failure, load_config
from prompt_schema.api.routes import requests_router, health_router


def create_app(
    config: AppConfig | None = None,
    config_path: str | Path | None = None,
) -> FastAPI:
    """
    FastAPI 앱 생성 (팩토리 패턴)

    Args:
        config: AppConfig 인스턴스 (직접 전달)
        config_path: YAML 설정 파일 경로

    우선순위: config > config_path > 기본 경로 탐색 > 기본값
    """
    if config is None:
        config_result = load_config(config_path)
        if isinstance(config_result, Failure):
            raise ValueError(f"Failed to load config: {config_result.error.message}")
        config = config_result.value

    app = FastAPI(
        title="Prompt Schema Server",
        description="Chat / completion request validation",
        version=__version__,
    )
    app.state.config = config

    app.include_router(health_router)
    app.include_router(requests_router)

    return app
