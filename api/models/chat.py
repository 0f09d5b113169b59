"""Pydantic models for /chat and /health responses."""

from typing import Any, Literal

from pydantic import BaseModel

from agent.planner.models import ResolvedArgs


class PlanningResponse(BaseModel):
    """Mode A success body."""

    ok: Literal[True] = True
    mode: Literal["small_talk", "business"]
    intent: str
    args: ResolvedArgs | None = None
    content: str | None = None
    meta: dict[str, Any] | None = None


class PhrasingResponse(BaseModel):
    """Mode B body."""

    content: str
    provider: Literal["groq", "fallback"]
    model: str | None = None


class ErrorResponse(BaseModel):
    """Error body for Mode A service failures."""

    ok: Literal[False] = False
    error: str


class HealthResponse(BaseModel):
    """Health check body."""

    ok: bool = True
    provider: Literal["groq", "fallback"]
    model: str
