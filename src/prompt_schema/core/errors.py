"""에러 타입 정의 (OR Type)"""
from dataclasses import dataclass
from typing import Union


# ============================================================
# 디코딩 에러
# ============================================================

@dataclass(frozen=True)
class MalformedJson:
    """JSON 문법 오류"""
    message: str
    line: int | None = None
    column: int | None = None
    position: int | None = None
    code: str = "MALFORMED_JSON"


@dataclass(frozen=True)
class SchemaMismatch:
    """최상위 값이 객체가 아님"""
    expected: str
    actual: str
    code: str = "SCHEMA_MISMATCH"


@dataclass(frozen=True)
class MissingField:
    """필수 필드 누락"""
    path: str
    code: str = "MISSING_FIELD"


@dataclass(frozen=True)
class TypeMismatch:
    """필드 타입 불일치"""
    path: str
    expected: str
    actual: str
    code: str = "TYPE_MISMATCH"


# OR Type: 모든 디코딩 에러
DecodeError = Union[
    MalformedJson,
    SchemaMismatch,
    MissingField,
    TypeMismatch,
]


# ============================================================
# 의미 검증 에러
# ============================================================

@dataclass(frozen=True)
class ValidationError:
    """검증 에러"""
    field: str
    message: str
    code: str = "VALIDATION_ERROR"


RequestError = Union[DecodeError, ValidationError]


# ============================================================
# 변환 (순수 함수)
# ============================================================

def describe_error(error: RequestError) -> str:
    """사람이 읽을 수 있는 한 줄 설명"""
    match error:
        case MalformedJson(message, line, column, _, _):
            if line is not None and column is not None:
                return f"malformed JSON at line {line} column {column}: {message}"
            return f"malformed JSON: {message}"
        case SchemaMismatch(expected, actual, _):
            return f"expected {expected} at top level, got {actual}"
        case MissingField(path, _):
            return f"{path}: missing required field"
        case TypeMismatch(path, expected, actual, _):
            return f"{path}: expected {expected}, got {actual}"
        case ValidationError(field, message, _):
            return f"{field}: {message}"
    raise TypeError(f"Unknown error type: {type(error).__name__}")


def error_to_dict(error: RequestError) -> dict:
    """에러를 딕셔너리로 변환 (API 응답용)"""
    message = describe_error(error)
    match error:
        case MalformedJson(_, line, column, position, code):
            return {"code": code, "line": line, "column": column, "position": position, "message": message}
        case SchemaMismatch(expected, actual, code):
            return {"code": code, "path": "", "expected": expected, "actual": actual, "message": message}
        case MissingField(path, code):
            return {"code": code, "path": path, "message": message}
        case TypeMismatch(path, expected, actual, code):
            return {"code": code, "path": path, "expected": expected, "actual": actual, "message": message}
        case ValidationError(field, _, code):
            return {"code": code, "path": field, "message": message}
    raise TypeError(f"Unknown error type: {type(error).__name__}")
