"""
Chat route handlers.

POST /chat accepts two payload shapes, dispatched on the presence of `meta`:

    {text, meta: {step, system_hint, context}}  → step phrasing (Mode B)
    {text, catalog?: {services, barbers}}       → planning (Mode A)
"""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from agent.conversation import (
    ConversationOrchestrator,
    InvalidStepMetaError,
    PlanningServiceError,
)
from api.dependencies import get_orchestrator
from api.models.chat import (
    ErrorResponse,
    HealthResponse,
    PhrasingResponse,
    PlanningResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class PayloadTooLargeError(Exception):
    """Raised when the request body exceeds MAX_BODY_BYTES."""

    pass


async def _read_json_object(request: Request, max_bytes: int) -> dict[str, Any] | None:
    declared_length = request.headers.get("content-length", "")
    if declared_length.isdigit() and int(declared_length) > max_bytes:
        raise PayloadTooLargeError(declared_length)

    body = await request.body()
    if len(body) > max_bytes:
        raise PayloadTooLargeError(str(len(body)))
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


@router.post("/chat")
async def chat(
    request: Request,
    orchestrator: Annotated[ConversationOrchestrator, Depends(get_orchestrator)],
) -> JSONResponse:
    """
    Handle one conversation turn.

    Returns:
        Mode A: 200 PlanningResponse, or 503 ErrorResponse if the model fails
        Mode B: 200 PhrasingResponse, or 400 if meta is malformed
        400 if the body is not a JSON object
        413 if the body exceeds MAX_BODY_BYTES
    """
    try:
        payload = await _read_json_object(request, orchestrator.settings.MAX_BODY_BYTES)
    except PayloadTooLargeError as e:
        logger.warning(
            f"Rejected /chat body: {e} bytes", extra={"request_path": "/chat"}
        )
        return JSONResponse(status_code=413, content={"error": "Payload too large"})

    if payload is None:
        logger.warning("Rejected /chat body: not a JSON object", extra={"request_path": "/chat"})
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": "body must be a JSON object"},
        )

    text = payload.get("text")

    if "meta" in payload:
        try:
            outcome = await orchestrator.phrase_step(text, payload["meta"])
        except InvalidStepMetaError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})

        response = PhrasingResponse(
            content=outcome.content,
            provider=outcome.provider,
            model=outcome.model,
        )
        return JSONResponse(content=response.model_dump(exclude_none=True))

    try:
        planning = await orchestrator.plan(text, payload.get("catalog"))
    except PlanningServiceError as e:
        logger.error(f"Planning failed: {e}", extra={"request_path": "/chat"})
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error=str(e)).model_dump(),
        )

    response = PlanningResponse(
        mode=planning.mode,
        intent=planning.intent.value,
        args=planning.args,
        content=planning.content,
        meta=planning.meta,
    )
    body = {key: value for key, value in response.model_dump().items() if value is not None}
    return JSONResponse(content=body)


@router.get("/health", response_model=HealthResponse)
async def health(
    orchestrator: Annotated[ConversationOrchestrator, Depends(get_orchestrator)],
) -> HealthResponse:
    """Report which provider answers /chat."""
    return HealthResponse(provider=orchestrator.provider, model=orchestrator.model)
