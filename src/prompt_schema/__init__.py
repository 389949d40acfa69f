"""
prompt-schema: versioned chat / completion request documents

LLM 백엔드 요청 문서(chat, completion)의 모델 정의와 디코딩, 검증.
"""

__version__ = "0.2.0"

from prompt_schema.core import (
    Chat, Completion, Message, Function, FunctionParameter, FunctionCall, Parameter,
    decode_chat, decode_completion,
    validate_chat, validate_completion,
    parse_request,
)

__all__ = [
    "Chat", "Completion", "Message", "Function", "FunctionParameter", "FunctionCall", "Parameter",
    "decode_chat", "decode_completion",
    "validate_chat", "validate_completion",
    "parse_request",
    "__version__",
]
