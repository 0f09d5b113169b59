"""
Deterministic replies for each step of the booking wizard.

Used when no model is configured, when the model call fails, or when it
returns an empty completion. The caller owns the wizard state; this module
only renders the sentence for the step it is told about.
"""

from enum import Enum
from typing import Any

MAX_SLOTS_SHOWN = 9
GENERIC_PROMPT = "¿Podrías indicarme el siguiente dato, por favor?"


class ConversationStep(str, Enum):
    """Steps of the caller-managed booking wizard."""

    SELECT_SERVICES = "selectServices"
    SELECT_BARBER = "selectBarber"
    PICK_DATE = "pickDate"
    VIEW_SLOTS = "viewSlots"
    CONFIRM = "confirm"
    DONE = "done"


KNOWN_STEPS: frozenset[str] = frozenset(step.value for step in ConversationStep)

STATIC_TEMPLATES: dict[ConversationStep, str] = {
    ConversationStep.SELECT_SERVICES: (
        '¿Qué servicios deseas? Responde con los números de la lista, por ejemplo: "1, 3".'
    ),
    ConversationStep.SELECT_BARBER: (
        'Perfecto. Elige un barbero de la lista escribiendo su número (ejemplo: "2").'
    ),
    ConversationStep.PICK_DATE: (
        "Indícame la fecha en formato YYYY-MM-DD. Ejemplo: 2025-09-20."
    ),
    ConversationStep.DONE: "¡Tu cita fue creada correctamente! ¿Necesitas algo más?",
}


def is_known_step(step: str) -> bool:
    """Return True if step is one of the six wizard steps."""
    return step in KNOWN_STEPS


def _render_slots(context: dict[str, Any]) -> str:
    slots = context.get("slots")
    if not isinstance(slots, list) or not slots:
        return "No hay horarios disponibles para esa fecha. ¿Deseas intentar con otro día?"

    lines = []
    for position, slot in enumerate(slots[:MAX_SLOTS_SHOWN], start=1):
        if isinstance(slot, dict):
            lines.append(f"{position}) {slot.get('start_time', '')}–{slot.get('end_time', '')}")
        else:
            lines.append(f"{position}) {slot}")

    return (
        "Horarios disponibles:\n"
        + "\n".join(lines)
        + "\n\nResponde con el número de tu preferencia."
    )


def _context_value(context: dict[str, Any], key: str) -> Any:
    value = context.get(key)
    return "?" if value is None else value


def _render_confirmation(context: dict[str, Any]) -> str:
    service_count = context.get("service_count")
    services_text = (
        f"{service_count} servicio(s)" if service_count else "los servicios seleccionados"
    )
    return (
        f"Confirmo: {services_text}, barbero #{_context_value(context, 'barber_id')}, "
        f"el {_context_value(context, 'date')} de {_context_value(context, 'start_time')} "
        f"a {_context_value(context, 'end_time')}. ¿Deseas confirmar? (sí/no)"
    )


def fallback_by_step(
    step: str,
    system_hint: str = "",
    context: dict[str, Any] | None = None,
) -> str:
    """
    Render the templated sentence for a wizard step.

    Args:
        step: Wizard step name (unknown steps are allowed)
        system_hint: Caller's instruction, echoed for unknown steps
        context: Step data (slots for viewSlots, booking summary for confirm)

    Returns:
        Spanish sentence for the step, never empty
    """
    ctx = context if isinstance(context, dict) else {}

    if not is_known_step(step):
        return system_hint if isinstance(system_hint, str) and system_hint else GENERIC_PROMPT

    current = ConversationStep(step)
    if current == ConversationStep.VIEW_SLOTS:
        return _render_slots(ctx)
    if current == ConversationStep.CONFIRM:
        return _render_confirmation(ctx)
    return STATIC_TEMPLATES[current]
