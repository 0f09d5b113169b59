"""
Chat completion client for the hosted language model.

Wraps a single Groq chat-completion call (OpenAI-compatible endpoint) behind
LangChain's ChatOpenAI. The client is built once per process from settings
and handed to the orchestrator, so tests can inject a double instead.

No retries: every call is attempted exactly once. Failures surface as
LLMUnavailableError and callers decide how to degrade.
"""

import logging
import time

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from shared.config import Settings

logger = logging.getLogger(__name__)

GROQ_PROVIDER = "groq"
FALLBACK_PROVIDER = "fallback"


class LLMUnavailableError(Exception):
    """Raised when the chat completion call fails (network, auth, rate limit, timeout)."""

    pass


class LLMClient:
    """Immutable handle on the configured chat model."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: float = 15.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self.model = model

    def _build_chat_model(
        self, temperature: float, max_tokens: int | None
    ) -> ChatOpenAI:
        return ChatOpenAI(
            model=self.model,
            api_key=self._api_key,
            base_url=self._base_url,
            temperature=temperature,
            max_tokens=max_tokens,
            request_timeout=self._timeout_seconds,
            max_retries=0,
        )

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        temperature: float,
        max_tokens: int | None = None,
    ) -> str:
        """
        Run one chat completion and return the stripped text content.

        Args:
            system_prompt: Instruction placed in the system role
            user_prompt: Content placed in the user role
            temperature: Sampling temperature for this call
            max_tokens: Optional completion length cap

        Returns:
            The model's text output (may be empty)

        Raises:
            LLMUnavailableError: If the call fails for any reason
        """
        start_time = time.time()
        llm = self._build_chat_model(temperature, max_tokens)

        try:
            response = await llm.ainvoke(
                [
                    SystemMessage(content=system_prompt),
                    HumanMessage(content=user_prompt),
                ]
            )
        except Exception as e:
            latency_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Chat completion failed | model={self.model} | error={e} "
                f"| latency={latency_ms:.0f}ms",
                exc_info=True,
            )
            raise LLMUnavailableError(str(e)) from e

        latency_ms = (time.time() - start_time) * 1000
        content = response.content if isinstance(response.content, str) else ""
        logger.info(
            f"Chat completion done | model={self.model} | chars={len(content)} "
            f"| latency={latency_ms:.0f}ms"
        )
        return content.strip()


def build_llm_client(settings: Settings) -> LLMClient | None:
    """
    Build the process-wide client, or None when no API key is configured.

    Args:
        settings: Loaded application settings

    Returns:
        LLMClient if GROQ_API_KEY is set, None otherwise
    """
    if not settings.GROQ_API_KEY.strip():
        logger.warning("GROQ_API_KEY not set - serving templated fallback replies only")
        return None

    return LLMClient(
        api_key=settings.GROQ_API_KEY,
        model=settings.LLM_MODEL,
        base_url=settings.GROQ_BASE_URL,
        timeout_seconds=settings.LLM_TIMEOUT_SECONDS,
    )


def provider_name(client: LLMClient | None) -> str:
    """Return the provider label reported to callers."""
    return GROQ_PROVIDER if client is not None else FALLBACK_PROVIDER
