from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..core.host import HostMessage, author_of
from .result import ALLOWED, DeniedWithMessage, PermissionResult

if TYPE_CHECKING:
    from ..commands.base import Command

logger = logging.getLogger(__name__)


class PermissionManager:
    def __init__(self, owners: str | Iterable[str] | None = None) -> None:
        self._owners: set[str] = set()
        self.set_owners(owners)

    @property
    def owners(self) -> frozenset[str]:
        return frozenset(self._owners)

    def set_owners(self, owners: str | Iterable[str] | None) -> None:
        """Accept a single address, a sequence of addresses or a set."""
        if owners is None:
            self._owners = set()
        elif isinstance(owners, str):
            self._owners = {owners} if owners else set()
        else:
            self._owners = {str(owner) for owner in owners if owner}
        logger.debug(f"Configured owners: {sorted(self._owners)}")

    def is_owner(self, address: str | None) -> bool:
        return bool(address) and address in self._owners

    async def check(
        self, command: Command, message: HostMessage, owner_override: bool = True
    ) -> PermissionResult:
        if not command.owner_only and not command.admin_only:
            return ALLOWED

        author = author_of(message)
        if owner_override and self.is_owner(author):
            return ALLOWED

        if command.owner_only and (owner_override or not self.is_owner(author)):
            return DeniedWithMessage(
                f"The ```{command.name}``` command can only be used by the bot owner."
            )

        if command.admin_only:
            chat = await message.get_chat()
            if chat.is_group:
                for participant in chat.participants:
                    if participant.address == author and not participant.is_admin:
                        logger.info(f"Denied {command.name} to non-admin {author}")
                        return DeniedWithMessage(
                            f"The ```{command.name}``` command can only be used by group admins."
                        )

        return ALLOWED
