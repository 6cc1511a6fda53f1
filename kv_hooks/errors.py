"""
Error types for the kv store.

Fatal errors stop the process with a non-zero exit status. The rest are
reported to the user and the invocation ends normally.
"""


class KvError(Exception):
    """Base class for kv errors."""

    fatal = True

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class StoreLocationError(KvError):
    """The per-user configuration directory cannot be resolved or created."""


class StorePersistenceError(KvError):
    """The store file cannot be opened, read or written."""


class CommandDispatchError(KvError):
    """The shell could not be started for a command."""


class DuplicateHookName(KvError):
    """A hook with the requested name already exists."""

    def __init__(self, name: str):
        super().__init__(
            f"Error! {name} already exists. To delete it try\n kv cmd del-hook {name}"
        )
        self.name = name


class HookNotFound(KvError):
    """No hook has the requested name."""

    fatal = False

    def __init__(self, name: str):
        super().__init__(f"Error! Hook {name} does not exist!")
        self.name = name


class CommandNotFound(KvError):
    """No named command has the requested name."""

    fatal = False

    def __init__(self, name: str):
        super().__init__(f"Error! Command '{name}' does not exist!")
        self.name = name


class InvalidOpKind(KvError, ValueError):
    """A token is not one of get, set or del."""

    fatal = False

    def __init__(self, token: str):
        super().__init__(f"Invalid operation '{token}', expected one of: get, set, del")
        self.token = token
