"""요청 문서 라우트 (chat / completion)"""
import logging

from fastapi import APIRouter, HTTPException, Request

from prompt_schema.core import (
    AppConfig, Success, Failure, RequestKind, parse_request,
)
from prompt_schema.api.dto.responses import AcceptedResponseDTO, ErrorResponseDTO
from prompt_schema.api.converters import (
    create_accepted_response, create_error_response, create_size_error_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["requests"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponseDTO},
    413: {"model": ErrorResponseDTO},
}


async def read_body(request: Request, limit: int) -> bytes:
    """본문 읽기 (limit 바이트 초과 시 413)"""
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise HTTPException(
            status_code=413,
            detail=create_size_error_response(limit).model_dump(exclude_none=True),
        )

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(
                status_code=413,
                detail=create_size_error_response(limit).model_dump(exclude_none=True),
            )
    return bytes(body)


async def handle_request(kind: RequestKind, request: Request) -> AcceptedResponseDTO:
    """raw 본문 -> 디코딩/검증 -> 응답"""
    config: AppConfig = request.app.state.config
    body = await read_body(request, config.server.max_body_bytes)

    result = parse_request(kind, body, strict=config.validation.strict)

    match result:
        case Success(document):
            logger.info("accepted %s request (engine=%s)", kind, document.engine)
            return create_accepted_response(document)
        case Failure(error):
            detail = create_error_response(error)
            logger.warning(
                "rejected %s request: %s %s",
                kind, detail.error.code, detail.error.message,
            )
            raise HTTPException(status_code=400, detail=detail.model_dump(exclude_none=True))


@router.post("/chat", response_model=AcceptedResponseDTO, responses=_ERROR_RESPONSES)
async def chat(request: Request) -> AcceptedResponseDTO:
    """Chat 요청 검증"""
    return await handle_request("chat", request)


@router.post("/completion", response_model=AcceptedResponseDTO, responses=_ERROR_RESPONSES)
async def completion(request: Request) -> AcceptedResponseDTO:
    """Completion 요청 검증"""
    return await handle_request("completion", request)
