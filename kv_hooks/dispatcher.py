"""
Request dispatcher.

Runs one resolved request: load the store, apply at most one change, save
it, fire the hooks for the key and print the result.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from kv_hooks import formatting
from kv_hooks.engine import CommandExecutor, HookEngine, HookRun
from kv_hooks.errors import CommandNotFound, DuplicateHookName, HookNotFound
from kv_hooks.models import OpKind
from kv_hooks.registry import Registry
from kv_hooks.repository import StoreRepository

logger = logging.getLogger(__name__)


class RequestKind(Enum):
    GET = "get"
    SET = "set"
    DELETE = "del"
    LIST_KEYS = "list-keys"
    LIST_COMMANDS = "list-cmds"
    LIST_HOOKS = "list-hooks"
    LIST_ALL = "list"
    RUN_COMMAND = "run"
    ADD_COMMAND = "add"
    ADD_HOOK = "add-hook"
    REMOVE_HOOK = "del-hook"


@dataclass(frozen=True)
class Request:
    """
    A parsed command line.

    key/value are used by get, set and del; name by the cmd subcommands
    (command name, or hook name for hooks); value also holds the command
    text for cmd add.
    """

    kind: RequestKind
    key: str | None = None
    value: str | None = None
    name: str | None = None
    cmd_name: str | None = None
    run_on: OpKind | None = None


class Dispatcher:
    """Carry out requests against a repository."""

    def __init__(
        self,
        repository: StoreRepository,
        engine: HookEngine,
        executor: CommandExecutor,
        out: TextIO,
    ):
        self.repository = repository
        self.engine = engine
        self.executor = executor
        self.out = out

    def handle(self, request: Request) -> int:
        """
        Carry out a request.

        Non-fatal errors are printed here. Fatal ones propagate.

        Returns:
            Exit status for the process

        Raises:
            KvError: For fatal conditions
        """
        logger.debug(f"Handling {request}")
        handler = getattr(self, f"_handle_{request.kind.name.lower()}")
        try:
            handler(request)
        except (HookNotFound, CommandNotFound) as e:
            self._print(e.message)
        except DuplicateHookName as e:
            self._print(e.message)
            return 1
        return 0

    def _handle_get(self, request: Request) -> None:
        store = self.repository.load()
        self._print_value(Registry(store.kvs).get(request.key))
        self._run_hooks(request.key, OpKind.GET)

    def _handle_set(self, request: Request) -> None:
        store = self.repository.load()
        Registry(store.kvs).set(request.key, request.value)
        self.repository.save(store)
        self._run_hooks(request.key, OpKind.SET)

    def _handle_delete(self, request: Request) -> None:
        store = self.repository.load()
        value = Registry(store.kvs).delete(request.key)
        self.repository.save(store)
        self._print_value(value)
        self._run_hooks(request.key, OpKind.DEL)

    def _handle_list_keys(self, request: Request) -> None:
        store = self.repository.load()
        self._print(formatting.format_entries(Registry(store.kvs)))

    def _handle_list_commands(self, request: Request) -> None:
        store = self.repository.load()
        self._print(formatting.format_entries(Registry(store.cmds)))

    def _handle_list_hooks(self, request: Request) -> None:
        store = self.repository.load()
        self._print(formatting.format_hooks(store))

    def _handle_list_all(self, request: Request) -> None:
        store = self.repository.load()
        self._print(formatting.format_all(store))

    def _handle_run_command(self, request: Request) -> None:
        store = self.repository.load()
        command = Registry(store.cmds).get(request.name)
        if command is None:
            raise CommandNotFound(request.name)
        self.executor.dispatch(command, name=request.name)

    def _handle_add_command(self, request: Request) -> None:
        store = self.repository.load()
        Registry(store.cmds).set(request.name, request.value)
        self.repository.save(store)

    def _handle_add_hook(self, request: Request) -> None:
        self.engine.add_hook(request.name, request.cmd_name, request.run_on, request.key)

    def _handle_remove_hook(self, request: Request) -> None:
        self.engine.remove_hook(request.name)

    def _run_hooks(self, key: str, op: OpKind) -> list[HookRun]:
        runs = self.engine.run_hooks(key, op)
        for run in runs:
            if run.bad:
                self._print(f"Error! Bad hook! Hook '{run.hook.name}' has no cmd!")
        return runs

    def _print_value(self, value: str | None) -> None:
        self._print(value if value is not None else "")

    def _print(self, text: str) -> None:
        print(text, file=self.out)
