import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class CommandEvents:
    """Names of the events emitted by the registry and dispatcher."""

    COMMAND_REGISTER = "command_register"
    COMMAND_PRERUN = "command_prerun"
    COMMAND_RUN = "command_run"
    COMMAND_BLOCKED = "command_blocked"
    COMMAND_ERROR = "command_error"
    COMMAND_STATUS_CHANGE = "command_status_change"
    UNKNOWN_COMMAND = "unknown_command"


class EventSystem:
    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable]] = {}
        self._middleware: list[Callable] = []

    def add_middleware(self, middleware: Callable) -> None:
        self._middleware.append(middleware)
        logger.debug(f"Added middleware: {_name(middleware)}")

    def remove_middleware(self, middleware: Callable) -> None:
        if middleware in self._middleware:
            self._middleware.remove(middleware)
            logger.debug(f"Removed middleware: {_name(middleware)}")

    def listen(self, event_name: str) -> Callable:
        def decorator(func: Callable) -> Callable:
            self.add_listener(event_name, func)
            return func

        return decorator

    def add_listener(self, event_name: str, callback: Callable) -> None:
        self._listeners.setdefault(event_name, []).append(callback)
        logger.debug(f"Added listener for {event_name}: {_name(callback)}")

    def remove_listener(self, event_name: str, callback: Callable) -> None:
        if event_name in self._listeners:
            try:
                self._listeners[event_name].remove(callback)
                logger.debug(f"Removed listener for {event_name}: {_name(callback)}")
            except ValueError:
                logger.warning(f"Listener {_name(callback)} not found for {event_name}")

    def remove_all_listeners(self, event_name: str) -> None:
        if event_name in self._listeners:
            self._listeners[event_name].clear()
            logger.debug(f"Removed all listeners for {event_name}")

    async def emit(self, event_name: str, *args: Any, **kwargs: Any) -> None:
        listeners = list(self._listeners.get(event_name, []))
        if not listeners and not self._middleware:
            return

        event_context = {
            "event_name": event_name,
            "args": args,
            "kwargs": kwargs,
            "stopped": False,
        }

        # Middleware sees every event, even those nobody listens to
        for middleware in self._middleware:
            try:
                result = await self._call_maybe_async(middleware, event_context, "pre")
                if result is False or event_context.get("stopped"):
                    logger.debug(f"Event {event_name} stopped by middleware")
                    return
            except Exception as e:
                logger.error(f"Error in middleware {_name(middleware)}: {e}")

        if listeners:
            results = await asyncio.gather(
                *(self._execute_listener(listener, *args, **kwargs) for listener in listeners),
                return_exceptions=True,
            )
            for listener, result in zip(listeners, results):
                if isinstance(result, Exception):
                    logger.error(f"Error in listener {_name(listener)} for {event_name}: {result}")

        for middleware in self._middleware:
            try:
                await self._call_maybe_async(middleware, event_context, "post")
            except Exception as e:
                logger.error(f"Error in middleware {_name(middleware)} (post): {e}")

    async def _execute_listener(self, listener: Callable, *args: Any, **kwargs: Any) -> None:
        await self._call_maybe_async(listener, *args, **kwargs)

    async def _call_maybe_async(self, func: Callable, *args: Any, **kwargs: Any) -> Any:
        result = func(*args, **kwargs)
        if asyncio.iscoroutine(result):
            return await result
        return result

    def get_listeners(self, event_name: str) -> list[Callable]:
        return self._listeners.get(event_name, []).copy()

    def get_all_events(self) -> list[str]:
        return list(self._listeners.keys())


def _name(func: Callable) -> str:
    return getattr(func, "__name__", type(func).__name__)
