"""FastAPI dependencies."""

from functools import lru_cache

from agent.conversation import ConversationOrchestrator
from shared.config import get_settings
from shared.llm_client import build_llm_client


@lru_cache
def get_orchestrator() -> ConversationOrchestrator:
    """
    Build the process-wide orchestrator once.

    The LLM client is created from settings at first use and never mutated.
    Tests replace this dependency via app.dependency_overrides.
    """
    settings = get_settings()
    return ConversationOrchestrator(build_llm_client(settings), settings)
