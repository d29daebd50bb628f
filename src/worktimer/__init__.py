"""Work timer - named stopwatches served over MCP."""

__version__ = "1.0.0"

from worktimer.registry import TimerRegistry, resolve_label

__all__ = ["TimerRegistry", "resolve_label"]
