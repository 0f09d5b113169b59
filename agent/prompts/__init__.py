"""
Prompt builders for the booking assistant.

- planner: Intent/argument extraction and small-talk instructions (Mode A)
- phrasing: Natural-language rendering of wizard steps (Mode B)
"""

from agent.prompts.phrasing import (
    build_phrasing_system_prompt,
    build_phrasing_user_prompt,
)
from agent.prompts.planner import (
    build_planner_system_prompt,
    build_small_talk_system_prompt,
)

__all__ = [
    "build_planner_system_prompt",
    "build_small_talk_system_prompt",
    "build_phrasing_system_prompt",
    "build_phrasing_user_prompt",
]
