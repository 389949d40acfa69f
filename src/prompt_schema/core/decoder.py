"""JSON 텍스트 -> 요청 문서 디코더 (순수 함수)

필드 단위로 명시적으로 검증하고, 실패 시 경로가 붙은 단일 에러를 반환한다.
경로 형식: ``messages[1].function_call.name``
"""
import json
from typing import Any, Callable, TypeVar

from prompt_schema.core.result import Result, Success, Failure
from prompt_schema.core.errors import (
    DecodeError, MalformedJson, SchemaMismatch, MissingField, TypeMismatch,
)
from prompt_schema.core.types import (
    Chat, Completion, Message, Function, FunctionParameter, FunctionCall, Parameter,
)

T = TypeVar('T')

# 배열/객체 최대 중첩 깊이 (응답 직렬화 한계보다 충분히 낮게)
MAX_NESTING_DEPTH = 128

# Python 타입 -> JSON 타입 이름
_JSON_TYPE_NAMES: tuple[tuple[type, str], ...] = (
    (bool, "boolean"),  # bool 은 int 의 서브클래스라 먼저 검사
    (int, "number"),
    (float, "number"),
    (str, "string"),
    (list, "array"),
    (dict, "object"),
)


def json_type_name(value: Any) -> str:
    """디코딩된 JSON 값의 타입 이름"""
    if value is None:
        return "null"
    for py_type, name in _JSON_TYPE_NAMES:
        if isinstance(value, py_type):
            return name
    return type(value).__name__


class _Abort(Exception):
    """디코딩 중단 (엔트리 포인트에서 Failure 로 변환)"""

    def __init__(self, error: DecodeError):
        self.error = error
        super().__init__(repr(error))


def _child(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _item(path: str, index: int) -> str:
    return f"{path}[{index}]"


def _check_text(value: str, path: str) -> str:
    """UTF-8 로 인코딩할 수 없는 문자열 (짝 없는 서로게이트 이스케이프) 거부"""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise _Abort(TypeMismatch(path, "valid unicode string", "string with unpaired surrogate"))
    return value


def _check_free(value: Any, path: str) -> Any:
    """자유 형식 JSON 값 내부의 문자열 검사 (깊이는 _load_json 에서 제한됨)"""
    if isinstance(value, str):
        _check_text(value, path)
    elif isinstance(value, list):
        for i, item in enumerate(value):
            _check_free(item, _item(path, i))
    elif isinstance(value, dict):
        for key, item in value.items():
            _check_text(key, path)
            _check_free(item, _child(path, key))
    return value


# ============================================================
# 경로 기반 필드 리더
# ============================================================

class _Fields:
    """경로가 붙은 JSON 객체 리더"""

    _MISSING = object()

    def __init__(self, data: dict[str, Any], path: str = ""):
        self._data = data
        self._path = path

    @classmethod
    def of(cls, value: Any, path: str) -> '_Fields':
        if not isinstance(value, dict):
            raise _Abort(TypeMismatch(path, "object", json_type_name(value)))
        return cls(value, path)

    def _lookup(self, key: str, required: bool) -> Any:
        value = self._data.get(key, self._MISSING)
        if value is self._MISSING:
            if required:
                raise _Abort(MissingField(_child(self._path, key)))
            return None
        if value is None and not required:
            # 선택 필드의 null 은 누락과 동일
            return None
        return value

    def _expect(self, key: str, value: Any, py_type: type, expected: str) -> Any:
        if not isinstance(value, py_type) or (py_type is not bool and isinstance(value, bool)):
            raise _Abort(TypeMismatch(_child(self._path, key), expected, json_type_name(value)))
        if isinstance(value, str):
            _check_text(value, _child(self._path, key))
        return value

    # --- 스칼라 ---

    def required_str(self, key: str, non_empty: bool = False) -> str:
        value = self._expect(key, self._lookup(key, required=True), str, "string")
        if non_empty and not value:
            raise _Abort(TypeMismatch(_child(self._path, key), "non-empty string", "empty string"))
        return value

    def optional_str(self, key: str) -> str | None:
        value = self._lookup(key, required=False)
        if value is None:
            return None
        return self._expect(key, value, str, "string")

    def optional_bool(self, key: str) -> bool | None:
        value = self._lookup(key, required=False)
        if value is None:
            return None
        return self._expect(key, value, bool, "boolean")

    def required_value(self, key: str) -> Any:
        """임의의 JSON 값 (null 포함, 변환 없음)"""
        if key not in self._data:
            raise _Abort(MissingField(_child(self._path, key)))
        return _check_free(self._data[key], _child(self._path, key))

    def optional_value(self, key: str) -> Any:
        return _check_free(self._data.get(key), _child(self._path, key))

    # --- 중첩 엔티티 ---

    def optional_object(self, key: str, decode: Callable[['_Fields'], T]) -> T | None:
        value = self._lookup(key, required=False)
        if value is None:
            return None
        return decode(_Fields.of(value, _child(self._path, key)))

    def required_list(self, key: str, decode: Callable[['_Fields'], T]) -> tuple[T, ...]:
        return self._decode_items(key, self._lookup(key, required=True), decode)

    def optional_list(self, key: str, decode: Callable[['_Fields'], T]) -> tuple[T, ...] | None:
        value = self._lookup(key, required=False)
        if value is None:
            return None
        return self._decode_items(key, value, decode)

    def _decode_items(self, key: str, value: Any, decode: Callable[['_Fields'], T]) -> tuple[T, ...]:
        self._expect(key, value, list, "array")
        path = _child(self._path, key)
        return tuple(
            decode(_Fields.of(item, _item(path, i)))
            for i, item in enumerate(value)
        )


# ============================================================
# 엔티티 디코더
# ============================================================

def _parameter(fields: _Fields) -> Parameter:
    name = fields.required_str("name", non_empty=True)
    value = fields.required_value("value")
    return Parameter(name=name, value=value)


def _function_parameter(fields: _Fields) -> FunctionParameter:
    name = fields.required_str("name")
    type_ = fields.required_str("type")
    return FunctionParameter(
        name=name,
        type=type_,
        required=fields.optional_bool("required"),
        description=fields.optional_str("description"),
        enums=fields.optional_value("enums"),
    )


def _function(fields: _Fields) -> Function:
    name = fields.required_str("name")
    parameters = fields.required_list("parameters", _function_parameter)
    return Function(
        name=name,
        parameters=parameters,
        description=fields.optional_str("description"),
    )


def _function_call(fields: _Fields) -> FunctionCall:
    return FunctionCall(
        name=fields.required_str("name"),
        arguments=fields.required_str("arguments"),
    )


def _message(fields: _Fields) -> Message:
    role = fields.required_str("role", non_empty=True)
    return Message(
        role=role,
        name=fields.optional_str("name"),
        content=fields.optional_str("content"),
        function_call=fields.optional_object("function_call", _function_call),
    )


def _chat(fields: _Fields) -> Chat:
    # 필수 필드 먼저
    version = fields.required_str("version")
    engine = fields.required_str("engine")
    messages = fields.required_list("messages", _message)
    return Chat(
        version=version,
        engine=engine,
        messages=messages,
        context=fields.optional_str("context"),
        parameters=fields.optional_list("parameters", _parameter),
        examples=fields.optional_list("examples", _message),
        functions=fields.optional_list("functions", _function),
    )


def _completion(fields: _Fields) -> Completion:
    version = fields.required_str("version")
    engine = fields.required_str("engine")
    prompt = fields.required_str("prompt")
    return Completion(
        version=version,
        engine=engine,
        prompt=prompt,
        parameters=fields.optional_list("parameters", _parameter),
    )


# ============================================================
# 엔트리 포인트
# ============================================================

def _nesting_exceeds(document: Any, limit: int) -> bool:
    """배열/객체 중첩 깊이가 limit 을 넘는지 (최상위 객체가 1)"""
    stack = [(document, 1)]
    while stack:
        value, depth = stack.pop()
        if isinstance(value, dict):
            children = value.values()
        elif isinstance(value, list):
            children = value
        else:
            continue
        if depth > limit:
            return True
        stack.extend((child, depth + 1) for child in children)
    return False


def _reject_constant(name: str) -> Any:
    raise _Abort(MalformedJson(f"invalid JSON constant {name!r}"))


def _load_json(raw_text: str | bytes | bytearray) -> Any:
    if isinstance(raw_text, (bytes, bytearray)):
        try:
            raw_text = bytes(raw_text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise _Abort(MalformedJson(f"invalid UTF-8: {e.reason}", position=e.start))
    try:
        document = json.loads(raw_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise _Abort(MalformedJson(e.msg, line=e.lineno, column=e.colno, position=e.pos))
    except RecursionError:
        raise _Abort(MalformedJson("document is nested too deeply"))

    if _nesting_exceeds(document, MAX_NESTING_DEPTH):
        raise _Abort(MalformedJson(f"document is nested deeper than {MAX_NESTING_DEPTH} levels"))
    return document


def _decode(raw_text: str | bytes | bytearray, build: Callable[[_Fields], T]) -> Result[T, DecodeError]:
    try:
        document = _load_json(raw_text)
        if not isinstance(document, dict):
            return Failure(SchemaMismatch(expected="object", actual=json_type_name(document)))
        return Success(build(_Fields(document)))
    except _Abort as abort:
        return Failure(abort.error)


def decode_chat(raw_text: str | bytes | bytearray) -> Result[Chat, DecodeError]:
    """JSON 텍스트를 Chat 으로 디코딩"""
    return _decode(raw_text, _chat)


def decode_completion(raw_text: str | bytes | bytearray) -> Result[Completion, DecodeError]:
    """JSON 텍스트를 Completion 으로 디코딩"""
    return _decode(raw_text, _completion)
