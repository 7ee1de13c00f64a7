from .client import CommanderClient
from .dispatcher import CommandDispatcher, DispatchOutcome
from .event_system import CommandEvents, EventSystem
from .registry import CommandRegistry

__all__ = [
    "CommanderClient",
    "CommandDispatcher",
    "CommandEvents",
    "CommandRegistry",
    "DispatchOutcome",
    "EventSystem",
]
