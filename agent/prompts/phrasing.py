"""Step phrasing prompts (Mode B)."""

import json
from typing import Any

PHRASING_SYSTEM_PROMPT_TEMPLATE = """
Eres el asistente conversacional de "{salon_name}".
Tu función: convertir instrucciones estructuradas en un texto breve y amable en español.
NO inventes datos, NO cambies pasos, NO tomes decisiones de negocio.
"""


def build_phrasing_system_prompt(salon_name: str) -> str:
    return PHRASING_SYSTEM_PROMPT_TEMPLATE.format(salon_name=salon_name)


def build_phrasing_user_prompt(
    step: str, system_hint: str, context: dict[str, Any]
) -> str:
    """
    Render the current wizard step for the model.

    Args:
        step: Wizard step name
        system_hint: Caller instruction ("(sin hint)" when empty)
        context: Step data, serialized as indented JSON
    """
    context_json = json.dumps(context or {}, ensure_ascii=False, indent=2, default=str)

    return f"""
Paso actual: {step}
Instrucción: {system_hint or '(sin hint)'}
Contexto JSON:
{context_json}

Redacta una respuesta corta en español, clara y natural.
"""
