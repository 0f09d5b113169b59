"""
Conversation module - per-turn coordination and wizard step templates.
"""

from agent.conversation.orchestrator import (
    ConversationOrchestrator,
    InvalidStepMetaError,
    PhrasingOutcome,
    PlanningOutcome,
    PlanningServiceError,
    StepMeta,
)
from agent.conversation.step_templates import (
    ConversationStep,
    fallback_by_step,
    is_known_step,
)

__all__ = [
    "ConversationOrchestrator",
    "ConversationStep",
    "InvalidStepMetaError",
    "PhrasingOutcome",
    "PlanningOutcome",
    "PlanningServiceError",
    "StepMeta",
    "fallback_by_step",
    "is_known_step",
]
