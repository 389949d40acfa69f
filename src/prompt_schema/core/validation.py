"""디코딩 이후 의미 검증 (순수 함수)

디코더는 구조만 검사한다. 역할별 필드 규칙, 함수 이름 중복 같은
의미 규칙은 여기서 검사하며 첫 번째 위반만 반환한다.
"""
from prompt_schema.core.types import Chat, Completion, Message, Function, Parameter
from prompt_schema.core.result import Result, Success, Failure
from prompt_schema.core.errors import ValidationError


def _first_duplicate(names: list[str]) -> int | None:
    """처음으로 중복된 이름의 인덱스"""
    seen: set[str] = set()
    for i, name in enumerate(names):
        if name in seen:
            return i
        seen.add(name)
    return None


def validate_parameters(
    parameters: tuple[Parameter, ...] | None
) -> Result[tuple[Parameter, ...] | None, ValidationError]:
    """파라미터 이름 중복 검사"""
    if parameters:
        index = _first_duplicate([p.name for p in parameters])
        if index is not None:
            return Failure(ValidationError(
                field=f"parameters[{index}].name",
                message=f"Duplicate parameter '{parameters[index].name}'",
                code="DUPLICATE_PARAMETER",
            ))
    return Success(parameters)


def validate_functions(
    functions: tuple[Function, ...] | None
) -> Result[tuple[Function, ...] | None, ValidationError]:
    """함수 이름 / 함수 인자 이름 중복 검사"""
    if not functions:
        return Success(functions)

    index = _first_duplicate([f.name for f in functions])
    if index is not None:
        return Failure(ValidationError(
            field=f"functions[{index}].name",
            message=f"Duplicate function '{functions[index].name}'",
            code="DUPLICATE_FUNCTION",
        ))

    for i, function in enumerate(functions):
        index = _first_duplicate([p.name for p in function.parameters])
        if index is not None:
            return Failure(ValidationError(
                field=f"functions[{i}].parameters[{index}].name",
                message=f"Duplicate parameter '{function.parameters[index].name}' in function '{function.name}'",
                code="DUPLICATE_FUNCTION_PARAMETER",
            ))

    return Success(functions)


def validate_message(
    message: Message,
    path: str,
    declared: frozenset[str] | None = None,
) -> Result[Message, ValidationError]:
    """역할별 필드 규칙 검사

    declared 가 주어지면 함수 이름이 선언된 함수인지도 검사한다.
    """
    if message.role == "function":
        if not message.name:
            return Failure(ValidationError(
                field=f"{path}.name",
                message="Function message must name the function that produced it",
                code="MISSING_FUNCTION_NAME",
            ))
        if declared is not None and message.name not in declared:
            return Failure(ValidationError(
                field=f"{path}.name",
                message=f"Function '{message.name}' is not declared in functions",
                code="UNKNOWN_FUNCTION",
            ))

    if message.content is None and message.function_call is None:
        return Failure(ValidationError(
            field=path,
            message="Message must carry content or function_call",
            code="EMPTY_MESSAGE",
        ))

    if message.function_call is not None:
        if message.role != "assistant":
            return Failure(ValidationError(
                field=f"{path}.function_call",
                message=f"function_call is only allowed on assistant messages, not '{message.role}'",
                code="ROLE_FIELD_MISMATCH",
            ))
        if declared is not None and message.function_call.name not in declared:
            return Failure(ValidationError(
                field=f"{path}.function_call.name",
                message=f"Function '{message.function_call.name}' is not declared in functions",
                code="UNKNOWN_FUNCTION",
            ))

    return Success(message)


def validate_chat(chat: Chat) -> Result[Chat, ValidationError]:
    """채팅 요청 의미 검증"""
    if not chat.messages:
        return Failure(ValidationError(
            field="messages",
            message="Chat must contain at least one message",
            code="EMPTY_MESSAGES",
        ))

    for check in (validate_parameters(chat.parameters), validate_functions(chat.functions)):
        if isinstance(check, Failure):
            return check

    declared = frozenset(f.name for f in chat.functions) if chat.functions is not None else None

    sections = (("examples", chat.examples or ()), ("messages", chat.messages))
    for section, messages in sections:
        for i, message in enumerate(messages):
            result = validate_message(message, f"{section}[{i}]", declared)
            if isinstance(result, Failure):
                return result

    return Success(chat)


def validate_completion(completion: Completion) -> Result[Completion, ValidationError]:
    """완성 요청 의미 검증"""
    if not completion.prompt.strip():
        return Failure(ValidationError(
            field="prompt",
            message="Prompt cannot be empty",
            code="EMPTY_PROMPT",
        ))

    check = validate_parameters(completion.parameters)
    if isinstance(check, Failure):
        return check

    return Success(completion)
