"""
Intent Validator - strict parsing of the planner's raw text output.

The planner is asked for a bare JSON object, but models sometimes wrap it in
a markdown code fence or answer in prose. This module strips the fence,
decodes the JSON and validates it against PlannerResult. Anything that does
not match exactly is rejected as a whole; nothing is partially accepted.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from agent.planner.models import PlannerResult

logger = logging.getLogger(__name__)


class PlannerOutputError(Exception):
    """Raised when the planner output is not a valid PlannerResult."""

    pass


def strip_code_fence(text: str) -> str:
    """
    Remove a surrounding ``` or ```json fence from a model response.

    Examples:
        >>> strip_code_fence('```json\\n{"intent": "small_talk"}\\n```')
        '{"intent": "small_talk"}'
    """
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def validate_planner_payload(value: Any) -> PlannerResult:
    """
    Validate an already decoded JSON value.

    Args:
        value: Decoded JSON (expected to be an object)

    Returns:
        PlannerResult with args.services defaulting to []

    Raises:
        PlannerOutputError: If the value does not match the planner shape
    """
    if not isinstance(value, dict):
        raise PlannerOutputError(
            f"Planner output must be a JSON object, got {type(value).__name__}"
        )

    try:
        return PlannerResult.model_validate(value)
    except ValidationError as e:
        raise PlannerOutputError(f"Planner output failed validation: {e}") from e


def parse_planner_output(raw_text: str) -> PlannerResult:
    """
    Parse raw model text into a PlannerResult.

    Args:
        raw_text: Text returned by the planner call

    Returns:
        Validated PlannerResult

    Raises:
        PlannerOutputError: On malformed JSON or schema mismatch
    """
    if not isinstance(raw_text, str):
        raise PlannerOutputError("Planner output is not text")

    cleaned = strip_code_fence(raw_text)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Planner returned non-JSON output: {raw_text[:200]!r}")
        raise PlannerOutputError(f"Planner output is not valid JSON: {e}") from e

    result = validate_planner_payload(data)
    logger.debug(f"Planner output validated | intent={result.intent.value}")
    return result
