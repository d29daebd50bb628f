"""Tool metadata for the timer operations."""

from typing import Any

from worktimer.server.requests import (
    EmptyRequest,
    LabelRequest,
    RenameRequest,
    SwitchRequest,
)
from worktimer.server.types import ToolMetadata, ToolType


def _parameters(model: type[EmptyRequest], **descriptions: str) -> dict[str, Any]:
    """Build the JSON schema of a request model, annotated per field."""
    schema = model.model_json_schema(by_alias=True)
    schema.pop("title", None)
    properties = schema.setdefault("properties", {})
    for name, prop in properties.items():
        prop.pop("title", None)
        if name in descriptions:
            prop["description"] = descriptions[name]
    return schema


TOOL_METADATA: list[ToolMetadata] = [
    {
        "id": "start_timer",
        "type": ToolType.START,
        "name": "Start Timer",
        "description": "Start a work timer. Optionally give it a label.",
        "parameters": _parameters(
            LabelRequest,
            label="Optional label for the timer (defaults to 'default')",
        ),
    },
    {
        "id": "current_timer",
        "type": ToolType.CURRENT,
        "name": "Current Timer",
        "description": "Check the elapsed time on a running timer without stopping it.",
        "parameters": _parameters(
            LabelRequest,
            label="Label of the timer to check (defaults to 'default')",
        ),
    },
    {
        "id": "stop_timer",
        "type": ToolType.STOP,
        "name": "Stop Timer",
        "description": "Stop a running work timer and see the elapsed time.",
        "parameters": _parameters(
            LabelRequest,
            label="Label of the timer to stop (defaults to 'default')",
        ),
    },
    {
        "id": "list_timers",
        "type": ToolType.LIST,
        "name": "List Timers",
        "description": "List all currently running timers with their elapsed time.",
        "parameters": _parameters(EmptyRequest),
    },
    {
        "id": "stop_all_timers",
        "type": ToolType.STOP_ALL,
        "name": "Stop All Timers",
        "description": "Stop all running timers and get a summary.",
        "parameters": _parameters(EmptyRequest),
    },
    {
        "id": "rename_timer",
        "type": ToolType.RENAME,
        "name": "Rename Timer",
        "description": "Rename a running timer without stopping it.",
        "parameters": _parameters(
            RenameRequest,
            **{
                "from": "Current label of the timer",
                "to": "New label for the timer",
            },
        ),
    },
    {
        "id": "switch_timer",
        "type": ToolType.SWITCH,
        "name": "Switch Timer",
        "description": "Stop the current timer and immediately start a new one.",
        "parameters": _parameters(
            SwitchRequest,
            stop="Label of the timer to stop (defaults to 'default')",
            start="Label for the new timer to start",
        ),
    },
]
