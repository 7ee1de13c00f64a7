import logging
import time
from typing import Any

logger = logging.getLogger(__name__)


class LoggingMiddleware:
    """Logs every emitted command event and how long its listeners took."""

    def __init__(self) -> None:
        self.start_times: dict[int, float] = {}

    async def __call__(self, event_context: dict[str, Any], phase: str) -> None:
        event_name = event_context.get("event_name")
        key = id(event_context)

        if phase == "pre":
            self.start_times[key] = time.perf_counter()
            logger.debug(f"Event started: {event_name}")

        elif phase == "post":
            start_time = self.start_times.pop(key, None)
            if start_time is not None:
                duration = time.perf_counter() - start_time
                logger.debug(f"Event completed: {event_name} (took {duration:.3f}s)")
            else:
                logger.debug(f"Event completed: {event_name}")
