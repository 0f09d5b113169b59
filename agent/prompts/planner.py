"""
Planner and small-talk prompts (Mode A).

The planner prompt embeds the request catalog so the model can answer with
either numeric ids or catalog names; names are mapped back to ids locally.
"""

from agent.planner.models import Catalog, IntentType

SMALL_TALK_SYSTEM_PROMPT_TEMPLATE = """Eres el asistente conversacional de "{salon_name}".
El cliente está conversando fuera del flujo de reservas.
Responde en español con una o dos frases breves, cálidas y naturales.
Si encaja, ofrece ayuda para reservar una cita, buscar servicios o consultar su próxima cita.
NO inventes precios, horarios, barberos ni servicios."""


def _format_services(catalog: Catalog) -> str:
    if not catalog.services:
        return "(sin servicios en el catálogo)"

    lines = []
    for service in catalog.services:
        line = f"- {service.id}: {service.name}"
        if service.synonyms:
            line += f" (sinónimos: {', '.join(service.synonyms)})"
        lines.append(line)
    return "\n".join(lines)


def _format_barbers(catalog: Catalog) -> str:
    if not catalog.barbers:
        return "(sin barberos en el catálogo)"
    return "\n".join(f"- {barber.id}: {barber.name}" for barber in catalog.barbers)


def build_planner_system_prompt(catalog: Catalog, salon_name: str) -> str:
    """
    Build the planner instruction with the catalog rendered as readable lines.

    Args:
        catalog: Catalog supplied with the request
        salon_name: Business name shown to the model

    Returns:
        System prompt asking for a single JSON object
    """
    intents = "\n".join(f"- {intent.value}" for intent in IntentType)

    return f"""Eres el planificador de reservas de "{salon_name}".
Analiza el mensaje del cliente y devuelve SOLO un objeto JSON, sin texto adicional ni markdown.

INTENCIONES VÁLIDAS:
{intents}

SERVICIOS (id: nombre):
{_format_services(catalog)}

BARBEROS (id: nombre):
{_format_barbers(catalog)}

FORMATO DE RESPUESTA:
{{
  "intent": "<una de las intenciones válidas>",
  "args": {{
    "barber": <id numérico, nombre del barbero del catálogo o null>,
    "appointment_date": "<YYYY-MM-DD o null>",
    "start_time": "<HH:MM:SS o null>",
    "end_time": "<HH:MM:SS o null>",
    "services": [<ids numéricos o nombres de servicios del catálogo>]
  }}
}}

REGLAS:
- Usa ids numéricos o nombres EXACTOS del catálogo para servicios y barbero.
- Usa null para cualquier dato que el cliente no haya dado.
- NO inventes servicios, barberos, fechas ni horas.
- Si el mensaje no trata de reservas, citas o servicios, usa "small_talk"."""


def build_small_talk_system_prompt(salon_name: str) -> str:
    """Instruction for the small-talk reply (no catalog context)."""
    return SMALL_TALK_SYSTEM_PROMPT_TEMPLATE.format(salon_name=salon_name)
