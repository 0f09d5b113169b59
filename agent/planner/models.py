"""
Planner data models.

- IntentType: Intents the planner may emit
- PlannerArgs / PlannerResult: Strict shape of the planner's JSON output
- CatalogService / CatalogBarber / Catalog: Per-request catalog snapshot
- ResolvedArgs: Caller-facing arguments with catalog names mapped to ids
"""

import logging
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)


class IntentType(str, Enum):
    """Intents recognized by the planner."""

    CREATE_APPOINTMENT = "create_appointment"
    GET_NEXT_APPOINTMENT = "get_next_appointment"
    SEARCH_SERVICES = "search_services"
    SMALL_TALK = "small_talk"


class PlannerArgs(BaseModel):
    """Arguments extracted by the planner. Absent fields default to null/empty."""

    model_config = ConfigDict(extra="ignore")

    barber: StrictInt | StrictStr | None = None
    appointment_date: StrictStr | None = None
    start_time: StrictStr | None = None
    end_time: StrictStr | None = None
    services: list[StrictInt | StrictStr] = Field(default_factory=list)


class PlannerResult(BaseModel):
    """Validated planner response."""

    model_config = ConfigDict(extra="ignore")

    intent: IntentType
    args: PlannerArgs = Field(default_factory=PlannerArgs)


class CatalogService(BaseModel):
    """A bookable service; synonyms are alternate names the customer may use."""

    id: StrictInt
    name: StrictStr
    synonyms: list[StrictStr] = Field(default_factory=list)

    @field_validator("synonyms", mode="before")
    @classmethod
    def null_synonyms_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CatalogBarber(BaseModel):
    """A barber that can be booked."""

    id: StrictInt
    name: StrictStr


class Catalog(BaseModel):
    """Snapshot of services and barbers supplied with a single request."""

    services: list[CatalogService] = Field(default_factory=list)
    barbers: list[CatalogBarber] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "Catalog":
        service_ids = [service.id for service in self.services]
        if len(service_ids) != len(set(service_ids)):
            raise ValueError("duplicate service id in catalog")

        barber_ids = [barber.id for barber in self.barbers]
        if len(barber_ids) != len(set(barber_ids)):
            raise ValueError("duplicate barber id in catalog")

        return self

    @classmethod
    def from_payload(cls, raw: Any) -> "Catalog":
        """
        Build a catalog from the raw request value.

        Missing or invalid payloads degrade to an empty catalog.
        """
        if raw is None:
            return cls()

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                f"Invalid catalog payload, using empty catalog: {e.error_count()} error(s)"
            )
            return cls()


class ResolvedArgs(BaseModel):
    """Planner arguments after catalog resolution."""

    barber: int | None = None
    appointment_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    services: list[int] = Field(default_factory=list)
