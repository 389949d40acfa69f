"""Prompt Schema Core - 요청 문서 모델과 디코더"""
from prompt_schema.core.types import (
    JsonValue,
    Parameter, FunctionParameter, Function, FunctionCall,
    Message, Chat, Completion,
)
from prompt_schema.core.result import (
    Result, Success, Failure,
    Railway, bind,
)
from prompt_schema.core.errors import (
    MalformedJson, SchemaMismatch, MissingField, TypeMismatch,
    DecodeError, ValidationError, RequestError,
    describe_error, error_to_dict,
)
from prompt_schema.core.decoder import (
    decode_chat, decode_completion, json_type_name,
)
from prompt_schema.core.validation import (
    validate_chat, validate_completion,
    validate_message, validate_functions, validate_parameters,
)
from prompt_schema.core.pipeline import (
    RequestKind, RequestDocument, parse_request,
)
from prompt_schema.core.config import (
    ServerConfig, ValidationConfig, LoggingConfig, AppConfig,
    load_yaml, parse_config, load_config, merge_config,
)

__all__ = [
    # Types
    "JsonValue",
    "Parameter", "FunctionParameter", "Function", "FunctionCall",
    "Message", "Chat", "Completion",
    # Result
    "Result", "Success", "Failure", "Railway",
    "bind",
    # Errors
    "MalformedJson", "SchemaMismatch", "MissingField", "TypeMismatch",
    "DecodeError", "ValidationError", "RequestError",
    "describe_error", "error_to_dict",
    # Decoder
    "decode_chat", "decode_completion", "json_type_name",
    # Validation
    "validate_chat", "validate_completion",
    "validate_message", "validate_functions", "validate_parameters",
    # Pipeline
    "RequestKind", "RequestDocument", "parse_request",
    # Config
    "ServerConfig", "ValidationConfig", "LoggingConfig", "AppConfig",
    "load_yaml", "parse_config", "load_config", "merge_config",
]
