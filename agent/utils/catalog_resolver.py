"""
Catalog Resolver - maps planner service/barber references to catalog ids.

Matching is exact after normalize_text() (case and accent insensitive); there
is no fuzzy or partial matching. Numeric ids are passed through without a
membership check, only string names are looked up. Unresolved names are
dropped and reported separately so the caller can surface them as metadata.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from agent.planner.models import (
    Catalog,
    CatalogBarber,
    CatalogService,
    PlannerArgs,
    ResolvedArgs,
)
from agent.utils.text import normalize_text

logger = logging.getLogger(__name__)


def _is_id(value: Any) -> bool:
    # bool is an int subclass but never a valid id
    return isinstance(value, int) and not isinstance(value, bool)


def build_service_index(services: Iterable[CatalogService]) -> dict[str, int]:
    """
    Build normalized name/synonym -> service id lookup.

    First entry wins when two keys normalize to the same string.
    """
    index: dict[str, int] = {}
    for service in services:
        for label in [service.name, *service.synonyms]:
            key = normalize_text(label)
            if key:
                index.setdefault(key, service.id)
    return index


def resolve_service_ids(
    requested: Sequence[int | str],
    services: Iterable[CatalogService],
) -> list[int]:
    """
    Resolve requested services to a deduplicated list of ids.

    Args:
        requested: Numeric ids and/or free-text names or synonyms
        services: Catalog services

    Returns:
        Ids in first-seen order, unresolved names dropped

    Example:
        >>> catalog = [CatalogService(id=1, name="Corte", synonyms=["corte de pelo"])]
        >>> resolve_service_ids(["CORTE", "corte de pelo", 1, "inexistente"], catalog)
        [1]
    """
    index = build_service_index(services)
    resolved: dict[int, None] = {}

    for item in requested:
        if _is_id(item):
            resolved[item] = None
        elif isinstance(item, str):
            service_id = index.get(normalize_text(item))
            if service_id is not None:
                resolved[service_id] = None

    return list(resolved)


def unresolved_service_names(
    requested: Sequence[int | str],
    services: Iterable[CatalogService],
) -> list[str]:
    """Return requested service names (original spelling) with no catalog match."""
    index = build_service_index(services)
    missing: list[str] = []

    for item in requested:
        if isinstance(item, str) and normalize_text(item) not in index and item not in missing:
            missing.append(item)

    return missing


def resolve_barber_id(
    requested: int | str | None,
    barbers: Iterable[CatalogBarber],
) -> int | None:
    """
    Resolve a barber reference to an id.

    None stays None, ints pass through unchanged, strings match the first
    barber whose normalized name is equal. No match returns None.
    """
    if requested is None:
        return None
    if _is_id(requested):
        return requested
    if not isinstance(requested, str):
        return None

    wanted = normalize_text(requested)
    for barber in barbers:
        if normalize_text(barber.name) == wanted:
            return barber.id
    return None


@dataclass
class ResolutionResult:
    """Resolved args plus the references that could not be resolved."""

    args: ResolvedArgs
    unresolved_services: list[str] = field(default_factory=list)
    unresolved_barber: str | None = None


def resolve_planner_args(args: PlannerArgs, catalog: Catalog) -> ResolutionResult:
    """
    Map planner args onto the request catalog.

    Args:
        args: Validated planner arguments
        catalog: Catalog supplied with the same request

    Returns:
        ResolutionResult with integer ids only
    """
    service_ids = resolve_service_ids(args.services, catalog.services)
    missing_services = unresolved_service_names(args.services, catalog.services)
    barber_id = resolve_barber_id(args.barber, catalog.barbers)

    unresolved_barber = None
    if isinstance(args.barber, str) and barber_id is None:
        unresolved_barber = args.barber

    if missing_services or unresolved_barber:
        logger.info(
            f"Unresolved catalog references | services={missing_services} "
            f"| barber={unresolved_barber!r}"
        )

    return ResolutionResult(
        args=ResolvedArgs(
            barber=barber_id,
            appointment_date=args.appointment_date,
            start_time=args.start_time,
            end_time=args.end_time,
            services=service_ids,
        ),
        unresolved_services=missing_services,
        unresolved_barber=unresolved_barber,
    )
