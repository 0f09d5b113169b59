"""
Utility functions shared by the planner and the conversation orchestrator.

- text: Case/accent-insensitive normalization
- catalog_resolver: Service and barber name → id resolution
"""

from agent.utils.catalog_resolver import (
    ResolutionResult,
    build_service_index,
    resolve_barber_id,
    resolve_planner_args,
    resolve_service_ids,
    unresolved_service_names,
)
from agent.utils.text import normalize_text

__all__ = [
    # Text normalization
    "normalize_text",
    # Catalog resolution
    "ResolutionResult",
    "build_service_index",
    "resolve_barber_id",
    "resolve_planner_args",
    "resolve_service_ids",
    "unresolved_service_names",
]
