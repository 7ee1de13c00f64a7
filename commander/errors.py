"""Exceptions raised by the command framework."""


class CommanderError(Exception):
    pass


class CommandRegistrationError(CommanderError):
    pass


class CommandDefinitionError(CommandRegistrationError):
    """A command or group was declared with invalid information."""


class ArgumentDefinitionError(CommandDefinitionError):
    """An argument list breaks the optional/infinite ordering rules."""


class InvalidCommandError(CommandRegistrationError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid command object to register: {value!r}")
        self.value = value


class DuplicateCommandError(CommandRegistrationError):
    def __init__(self, token: str) -> None:
        super().__init__(f'A command with the name/alias "{token}" is already registered.')
        self.token = token


class UnknownCommandConflictError(CommandRegistrationError):
    def __init__(self) -> None:
        super().__init__("An unknown command is already registered.")


class GroupNotFoundError(CommandRegistrationError):
    def __init__(self, group_id: str) -> None:
        super().__init__(f'Group "{group_id}" is not registered.')
        self.group_id = group_id


class CommandGuardedError(CommanderError):
    def __init__(self, name: str) -> None:
        super().__init__(f'"{name}" is guarded and cannot be disabled.')
        self.name = name


class ArgumentParseError(CommanderError):
    """A token could not be converted to the argument's type."""

    def __init__(self, key: str, value: str, reason: str = "") -> None:
        super().__init__(reason or f"Invalid value {value!r} for argument {key}")
        self.key = key
        self.value = value
