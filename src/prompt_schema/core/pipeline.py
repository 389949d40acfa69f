"""디코딩 -> 의미 검증 파이프라인"""
from typing import Callable, Literal

from prompt_schema.core.types import Chat, Completion
from prompt_schema.core.result import Result, Railway
from prompt_schema.core.errors import RequestError
from prompt_schema.core.decoder import decode_chat, decode_completion
from prompt_schema.core.validation import validate_chat, validate_completion

RequestKind = Literal["chat", "completion"]
RequestDocument = Chat | Completion

_HANDLERS: dict[str, tuple[Callable, Callable]] = {
    "chat": (decode_chat, validate_chat),
    "completion": (decode_completion, validate_completion),
}


def parse_request(
    kind: RequestKind,
    raw_text: str | bytes | bytearray,
    strict: bool = True,
) -> Result[RequestDocument, RequestError]:
    """raw 텍스트를 요청 문서로 변환 (strict 이면 의미 검증까지)"""
    try:
        decode, validate = _HANDLERS[kind]
    except KeyError:
        raise ValueError(f"Unknown request kind: {kind!r}") from None

    return (
        Railway.from_result(decode(raw_text))
        .bind_if(strict, validate)
        .unwrap()
    )
