"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field
import pydantic
import yaml

from prompt_schema.core.result import Result, Success, Failure
from prompt_schema.core.errors import ValidationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_CONFIG_PATHS = (
    Path("prompt-schema.yaml"),
    Path("prompt-schema.yml"),
    Path.home() / ".config" / "prompt-schema" / "config.yaml",
)


# ============================================================
# 섹션별 설정
# ============================================================

class ServerConfig(BaseModel):
    """HTTP 서버 설정"""
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    max_body_bytes: int = Field(default=1024 * 1024, ge=1)  # 디코딩 전 입력 크기 상한

    model_config = {"frozen": True}


class ValidationConfig(BaseModel):
    """검증 설정"""
    strict: bool = True  # 디코딩 후 의미 검증 적용 여부

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: LogLevel = "INFO"

    model_config = {"frozen": True}


class AppConfig(BaseModel):
    """전체 애플리케이션 설정"""
    server: ServerConfig = Field(default_factory=ServerConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

def load_yaml(path: Path) -> Result[dict, ValidationError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Failure(ValidationError(
            field="config_path",
            message=f"Config file not found: {path}",
        ))
    except yaml.YAMLError as e:
        return Failure(ValidationError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))

    if data is None:
        return Success({})
    if not isinstance(data, dict):
        return Failure(ValidationError(
            field="config_yaml",
            message=f"Config root must be a mapping, got {type(data).__name__}",
        ))
    return Success(data)


def parse_config(data: dict) -> Result[AppConfig, ValidationError]:
    """딕셔너리를 AppConfig 로 파싱"""
    try:
        return Success(AppConfig.model_validate(data))
    except pydantic.ValidationError as e:
        return Failure(ValidationError(
            field="config",
            message=str(e),
        ))


def load_config(path: Path | str | None = None) -> Result[AppConfig, ValidationError]:
    """
    설정 로드 (YAML + 기본값)

    path 가 없으면 기본 경로들을 탐색하고, 아무 파일도 없으면 기본값을 사용한다.
    """
    if path is None:
        path = next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)

    if path is None:
        return Success(AppConfig())

    yaml_result = load_yaml(Path(path))
    if isinstance(yaml_result, Failure):
        return yaml_result

    return parse_config(yaml_result.value)


def merge_config(base: AppConfig, overrides: dict) -> Result[AppConfig, ValidationError]:
    """설정 병합 (CLI 인자 등)"""
    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    return parse_config(deep_merge(base.model_dump(), overrides))
