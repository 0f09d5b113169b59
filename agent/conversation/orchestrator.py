"""
Conversation Orchestrator - coordinates one chat turn.

Two independent protocols share the /chat route:

    Mode A (planning)  → text + optional catalog
                         planner call → validate JSON → resolve catalog names
                         invalid output or small_talk → second small-talk call
    Mode B (phrasing)  → text + meta {step, system_hint, context}
                         one phrasing call, templated fallback on any failure

The orchestrator holds no per-request state. The LLM client is injected at
construction (None means no model configured).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

from agent.conversation.step_templates import fallback_by_step, is_known_step
from agent.planner.intent_validator import PlannerOutputError, parse_planner_output
from agent.planner.models import Catalog, IntentType, ResolvedArgs
from agent.prompts import (
    build_phrasing_system_prompt,
    build_phrasing_user_prompt,
    build_planner_system_prompt,
    build_small_talk_system_prompt,
)
from agent.utils.catalog_resolver import resolve_planner_args
from shared.config import Settings
from shared.llm_client import (
    FALLBACK_PROVIDER,
    GROQ_PROVIDER,
    LLMClient,
    provider_name,
)

logger = logging.getLogger(__name__)

SMALL_TALK_FALLBACK = "¡Hola! ¿En qué puedo ayudarte con tu cita en la barbería?"


class PlanningServiceError(Exception):
    """Raised when Mode A cannot reach the model (missing client or failed call)."""

    pass


class InvalidStepMetaError(Exception):
    """Raised when a Mode B request carries a malformed meta object."""

    pass


@dataclass
class PlanningOutcome:
    """Result of a Mode A turn."""

    mode: Literal["small_talk", "business"]
    intent: IntentType
    args: ResolvedArgs | None = None
    content: str | None = None
    meta: dict[str, Any] | None = None


@dataclass
class PhrasingOutcome:
    """Result of a Mode B turn."""

    content: str
    provider: str
    model: str | None = None


@dataclass
class StepMeta:
    """Sanitized Mode B meta payload."""

    step: str
    system_hint: str
    context: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, raw: Any) -> "StepMeta":
        """
        Coerce the raw meta value; non-string fields become "", non-object context {}.

        Raises:
            InvalidStepMetaError: If raw is not a JSON object
        """
        if not isinstance(raw, dict):
            raise InvalidStepMetaError("meta es requerido")

        step = raw.get("step")
        system_hint = raw.get("system_hint")
        context = raw.get("context")
        return cls(
            step=step if isinstance(step, str) else "",
            system_hint=system_hint if isinstance(system_hint, str) else "",
            context=context if isinstance(context, dict) else {},
        )


def _coerce_text(text: Any, max_length: int) -> str:
    if not isinstance(text, str):
        return ""
    return text[:max_length]


class ConversationOrchestrator:
    """Runs planning (Mode A) and step phrasing (Mode B) turns."""

    def __init__(self, llm_client: LLMClient | None, settings: Settings) -> None:
        self.llm_client = llm_client
        self.settings = settings

    @property
    def provider(self) -> str:
        return provider_name(self.llm_client)

    @property
    def model(self) -> str:
        return self.llm_client.model if self.llm_client is not None else "templates"

    # ------------------------------------------------------------------
    # Mode A - catalog planning
    # ------------------------------------------------------------------

    async def plan(self, text: Any, catalog_payload: Any = None) -> PlanningOutcome:
        """
        Classify intent and extract booking arguments.

        Args:
            text: Customer message (truncated to MAX_TEXT_LENGTH)
            catalog_payload: Raw catalog from the request; invalid → empty

        Returns:
            PlanningOutcome in small_talk or business mode

        Raises:
            PlanningServiceError: If no model is configured or a call fails
        """
        message = _coerce_text(text, self.settings.MAX_TEXT_LENGTH)
        catalog = Catalog.from_payload(catalog_payload)

        if self.llm_client is None:
            raise PlanningServiceError("LLM no configurado")

        logger.info(
            f"Planning turn | services={len(catalog.services)} "
            f"| barbers={len(catalog.barbers)} | message={message[:50]}...",
            extra={"mode": "planning"},
        )

        try:
            raw_output = await self.llm_client.complete(
                build_planner_system_prompt(catalog, self.settings.SALON_NAME),
                message,
                temperature=self.settings.PLANNER_TEMPERATURE,
            )
        except Exception as e:
            logger.error(f"Planning model call failed: {e}", extra={"mode": "planning"})
            raise PlanningServiceError("Fallo al consultar el modelo") from e

        try:
            result = parse_planner_output(raw_output)
        except PlannerOutputError as e:
            logger.info(f"Planner output rejected, answering as small talk: {e}")
            return await self._small_talk(message)

        if result.intent == IntentType.SMALL_TALK:
            return await self._small_talk(message)

        resolution = resolve_planner_args(result.args, catalog)
        logger.info(
            f"Planning done | intent={result.intent.value} "
            f"| services={resolution.args.services} | barber={resolution.args.barber}",
            extra={"mode": "business", "intent": result.intent.value},
        )

        return PlanningOutcome(
            mode="business",
            intent=result.intent,
            args=resolution.args,
            meta={
                "unresolved_services": resolution.unresolved_services,
                "unresolved_barber": resolution.unresolved_barber,
            },
        )

    async def _small_talk(self, message: str) -> PlanningOutcome:
        try:
            content = await self.llm_client.complete(
                build_small_talk_system_prompt(self.settings.SALON_NAME),
                message,
                temperature=self.settings.SMALL_TALK_TEMPERATURE,
            )
        except Exception as e:
            logger.error(f"Small talk model call failed: {e}", extra={"mode": "planning"})
            raise PlanningServiceError("Fallo al consultar el modelo") from e

        return PlanningOutcome(
            mode="small_talk",
            intent=IntentType.SMALL_TALK,
            args=ResolvedArgs(),
            content=content or SMALL_TALK_FALLBACK,
        )

    # ------------------------------------------------------------------
    # Mode B - step-scripted phrasing
    # ------------------------------------------------------------------

    async def phrase_step(self, text: Any, meta_payload: Any) -> PhrasingOutcome:
        """
        Render the current wizard step as a short natural sentence.

        Never raises for model problems: any failure returns the step template.

        Raises:
            InvalidStepMetaError: If meta is missing or not an object
        """
        meta = StepMeta.from_payload(meta_payload)

        if not is_known_step(meta.step):
            logger.warning(f"Non-standard step: {meta.step!r}", extra={"step": meta.step})

        message = _coerce_text(text, self.settings.MAX_TEXT_LENGTH)
        logger.info(
            f"Phrasing turn | step={meta.step} | message={message[:50]}...",
            extra={"mode": "phrasing", "step": meta.step},
        )

        if self.llm_client is None:
            return PhrasingOutcome(
                content=fallback_by_step(meta.step, meta.system_hint, meta.context),
                provider=FALLBACK_PROVIDER,
            )

        try:
            content = await self.llm_client.complete(
                build_phrasing_system_prompt(self.settings.SALON_NAME),
                build_phrasing_user_prompt(meta.step, meta.system_hint, meta.context),
                temperature=self.settings.PHRASING_TEMPERATURE,
                max_tokens=self.settings.PHRASING_MAX_TOKENS,
            )
        except Exception as e:
            logger.error(
                f"Step phrasing failed, using template | step={meta.step} | error={e}",
                extra={"step": meta.step, "provider": FALLBACK_PROVIDER},
            )
            return PhrasingOutcome(
                content=fallback_by_step(meta.step, meta.system_hint, meta.context),
                provider=FALLBACK_PROVIDER,
            )

        if not isinstance(content, str) or not content.strip():
            content = fallback_by_step(meta.step, meta.system_hint, meta.context)

        return PhrasingOutcome(
            content=content.strip(),
            provider=GROQ_PROVIDER,
            model=self.llm_client.model,
        )
