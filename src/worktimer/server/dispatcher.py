"""Command dispatcher.

Validates the arguments of an incoming call, runs the matching registry
operation and renders its outcome as text. Validation failures are the only
errors raised here; everything the registry reports comes back as a message.
"""

import logging
from collections.abc import Callable
from typing import Any

import pydantic

from worktimer.errors import InvalidRequestError, ValidationError
from worktimer.formatting import render
from worktimer.logging import log_tool_call
from worktimer.registry import Outcome, TimerRegistry
from worktimer.server.requests import (
    EmptyRequest,
    LabelRequest,
    RenameRequest,
    SwitchRequest,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Outcome]


def _describe(error: pydantic.ValidationError) -> str:
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{field}: {item['msg']}")
    return "; ".join(problems)


class Dispatcher:
    """Routes named operations to one :class:`TimerRegistry`."""

    def __init__(self, registry: TimerRegistry) -> None:
        """Initialize dispatcher.

        Args:
            registry: Registry every call operates on
        """
        self.registry = registry
        self._routes: dict[str, tuple[type[EmptyRequest], Handler]] = {
            "start_timer": (
                LabelRequest,
                lambda req: registry.start_timer(req.label),
            ),
            "current_timer": (
                LabelRequest,
                lambda req: registry.current_timer(req.label),
            ),
            "stop_timer": (
                LabelRequest,
                lambda req: registry.stop_timer(req.label),
            ),
            "list_timers": (EmptyRequest, lambda req: registry.list_timers()),
            "stop_all_timers": (
                EmptyRequest,
                lambda req: registry.stop_all_timers(),
            ),
            "rename_timer": (
                RenameRequest,
                lambda req: registry.rename_timer(req.from_, to_label=req.to),
            ),
            "switch_timer": (
                SwitchRequest,
                lambda req: registry.switch_timer(req.stop, start_label=req.start),
            ),
        }

    @property
    def operations(self) -> tuple[str, ...]:
        """Names of the operations this dispatcher accepts."""
        return tuple(self._routes)

    def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Run one operation and return its message.

        Args:
            name: Operation name, e.g. ``start_timer``
            arguments: Operation arguments; ``None`` means no arguments

        Returns:
            Text describing the outcome

        Raises:
            InvalidRequestError: If the operation is unknown
            ValidationError: If the arguments are malformed
        """
        route = self._routes.get(name)
        if route is None:
            raise InvalidRequestError(f"Unknown operation: {name}")

        model, handler = route
        arguments = arguments or {}
        log_tool_call(logger, name, arguments)
        try:
            request = model.model_validate(arguments)
        except pydantic.ValidationError as e:
            logger.warning("Rejected %s call: %s", name, _describe(e))
            raise ValidationError(f"Invalid {name} request: {_describe(e)}") from e

        return render(handler(request))
