"""
Planner module - structured intent extraction from free text.

- models: IntentType, PlannerArgs, PlannerResult, Catalog, ResolvedArgs
- intent_validator: Strict parsing of the model's raw JSON output
"""

from agent.planner.intent_validator import (
    PlannerOutputError,
    parse_planner_output,
    strip_code_fence,
    validate_planner_payload,
)
from agent.planner.models import (
    Catalog,
    CatalogBarber,
    CatalogService,
    IntentType,
    PlannerArgs,
    PlannerResult,
    ResolvedArgs,
)

__all__ = [
    "Catalog",
    "CatalogBarber",
    "CatalogService",
    "IntentType",
    "PlannerArgs",
    "PlannerOutputError",
    "PlannerResult",
    "ResolvedArgs",
    "parse_planner_output",
    "strip_code_fence",
    "validate_planner_payload",
]
