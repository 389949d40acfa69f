"""요청 문서 도메인 타입 (불변, 검증됨)"""
from dataclasses import dataclass
from typing import Any, TypeAlias

# JSON 값 (Parameter.value, FunctionParameter.enums)
JsonValue: TypeAlias = None | bool | int | float | str | list[Any] | dict[str, Any]


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """None 인 선택 필드 제거"""
    return {k: v for k, v in data.items() if v is not None}


def _dump_all(items: tuple | None) -> list[dict] | None:
    if items is None:
        return None
    return [item.to_dict() for item in items]


# ============================================================
# 파라미터 / 함수 정의
# ============================================================

@dataclass(frozen=True)
class Parameter:
    """튜닝 파라미터 (예: temperature)"""
    name: str
    value: JsonValue

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class FunctionParameter:
    """함수 인자 정의"""
    name: str
    type: str
    required: bool | None = None
    description: str | None = None
    enums: JsonValue = None

    def to_dict(self) -> dict:
        return _compact({
            "name": self.name,
            "type": self.type,
            "required": self.required,
            "description": self.description,
            "enums": self.enums,
        })


@dataclass(frozen=True)
class Function:
    """모델이 호출할 수 있는 함수"""
    name: str
    parameters: tuple[FunctionParameter, ...] = ()
    description: str | None = None

    def to_dict(self) -> dict:
        return _compact({
            "name": self.name,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
        })


@dataclass(frozen=True)
class FunctionCall:
    """메시지에 기록된 함수 호출 (arguments 는 JSON 텍스트 그대로)"""
    name: str
    arguments: str

    def to_dict(self) -> dict:
        return {"name": self.name, "arguments": self.arguments}


# ============================================================
# 메시지
# ============================================================

@dataclass(frozen=True)
class Message:
    """대화 메시지"""
    role: str
    content: str | None = None
    name: str | None = None  # role == "function" 일 때 함수 이름
    function_call: FunctionCall | None = None

    def to_dict(self) -> dict:
        return _compact({
            "role": self.role,
            "name": self.name,
            "content": self.content,
            "function_call": self.function_call.to_dict() if self.function_call else None,
        })


# ============================================================
# 요청 문서
# ============================================================

@dataclass(frozen=True)
class Chat:
    """멀티턴 채팅 요청"""
    version: str
    engine: str
    messages: tuple[Message, ...]
    context: str | None = None
    parameters: tuple[Parameter, ...] | None = None
    examples: tuple[Message, ...] | None = None
    functions: tuple[Function, ...] | None = None

    def to_dict(self) -> dict:
        return _compact({
            "version": self.version,
            "engine": self.engine,
            "context": self.context,
            "parameters": _dump_all(self.parameters),
            "examples": _dump_all(self.examples),
            "messages": [m.to_dict() for m in self.messages],
            "functions": _dump_all(self.functions),
        })


@dataclass(frozen=True)
class Completion:
    """단발성 완성 요청"""
    version: str
    engine: str
    prompt: str
    parameters: tuple[Parameter, ...] | None = None

    def to_dict(self) -> dict:
        return _compact({
            "version": self.version,
            "engine": self.engine,
            "prompt": self.prompt,
            "parameters": _dump_all(self.parameters),
        })
