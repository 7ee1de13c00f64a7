import logging
import traceback
from typing import Any

from ..core.event_system import CommandEvents

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Reports exceptions raised inside commands to the operator log."""

    def __init__(self) -> None:
        self.error_count = 0

    async def __call__(self, event_context: dict[str, Any], phase: str) -> None:
        if phase != "post" or event_context.get("event_name") != CommandEvents.COMMAND_ERROR:
            return

        # command_error is emitted as (command, error, message)
        args = event_context.get("args", ())
        if len(args) < 2 or not isinstance(args[1], BaseException):
            return

        command, error = args[0], args[1]
        self.error_count += 1
        logger.error(f"Error in command {getattr(command, 'name', command)}: {error}")
        logger.error(
            "Traceback: "
            + "".join(traceback.format_exception(type(error), error, error.__traceback__))
        )

