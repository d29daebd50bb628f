"""Argument records for the timer operations."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

LABEL_PATTERN = r"^[a-z0-9_-]+$"
LABEL_MAX_LENGTH = 30
LABEL_HINT = "Label must be lowercase alphanumeric with hyphens/underscores only"

Label = Annotated[
    str,
    Field(
        min_length=1,
        max_length=LABEL_MAX_LENGTH,
        pattern=LABEL_PATTERN,
        description=LABEL_HINT,
    ),
]


class EmptyRequest(BaseModel):
    """Request for an operation that takes no arguments."""

    model_config = ConfigDict(extra="forbid")


class LabelRequest(EmptyRequest):
    """Request naming one optional timer label."""

    label: Label | None = None


class RenameRequest(EmptyRequest):
    """Rename request; ``from`` is a Python keyword, hence the alias."""

    from_: Label | None = Field(default=None, alias="from")
    to: Label


class SwitchRequest(EmptyRequest):
    """Switch request."""

    stop: Label | None = None
    start: Label
