from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from config.settings import settings

from ..middleware import ErrorHandlerMiddleware, LoggingMiddleware
from ..permissions import PermissionManager
from .dispatcher import CommandDispatcher, DispatchOutcome
from .event_system import EventSystem
from .host import HostClient, HostMessage
from .registry import CommandRegistry

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class CommanderClient:
    """Attaches the command registry and dispatcher to a host chat client."""

    def __init__(
        self,
        client: HostClient,
        prefix: str | None = _UNSET,
        owner: str | Iterable[str] | None = _UNSET,
        owner_override: bool | None = None,
    ) -> None:
        self.client = client
        self._prefix = settings.bot_prefix if prefix is _UNSET else prefix
        self.owner_override = settings.owner_override if owner_override is None else owner_override
        self._address: str | None = None
        self._subscribed = False
        self._pending_events: set[asyncio.Task] = set()

        self.event_system = EventSystem()
        self.event_system.add_middleware(LoggingMiddleware())
        self.event_system.add_middleware(ErrorHandlerMiddleware())

        self.permission_manager = PermissionManager(settings.bot_owner if owner is _UNSET else owner)
        self.registry = CommandRegistry(self)
        self.dispatcher = CommandDispatcher(self, self.registry)

    @property
    def prefix(self) -> str | None:
        return self._prefix

    @prefix.setter
    def prefix(self, value: str | None) -> None:
        self._prefix = value
        logger.info(f"Command prefix set to {value!r}")

    @property
    def address(self) -> str:
        """The bot's own address, read from the host client on first use."""
        if self._address is None:
            self._address = str(self.client.info.address)
        return self._address

    def refresh_address(self) -> str:
        self._address = None
        return self.address

    @property
    def owners(self) -> frozenset[str]:
        return self.permission_manager.owners

    def is_owner(self, address: str | None) -> bool:
        return self.permission_manager.is_owner(address)

    def start(self) -> CommanderClient:
        """Subscribe the dispatcher to the host's message stream (once)."""
        if not self._subscribed:
            self.client.subscribe("message", self.handle_message)
            self._subscribed = True
            logger.info("Commander subscribed to host messages")
        return self

    async def handle_message(self, message: HostMessage) -> DispatchOutcome:
        try:
            return await self.dispatcher.handle_message(message)
        except Exception as e:
            logger.error(f"Unhandled error dispatching message {getattr(message, 'id', '?')}: {e}")
            return DispatchOutcome.ERROR

    def schedule_event(self, event_name: str, *args: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running event loop, dropping {event_name} event")
            return
        task = loop.create_task(self.event_system.emit(event_name, *args))
        self._pending_events.add(task)
        task.add_done_callback(self._pending_events.discard)
