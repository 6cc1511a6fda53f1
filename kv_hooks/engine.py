"""
Hook engine.

Keeps the hook list in the store and runs the commands bound to an
operation on a key.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from kv_hooks.errors import DuplicateHookName, HookNotFound
from kv_hooks.models import Hook, OpKind
from kv_hooks.registry import Registry
from kv_hooks.repository import StoreRepository

logger = logging.getLogger(__name__)


class CommandExecutor(Protocol):
    def dispatch(self, command: str, *, name: str, context: dict[str, str] | None = None) -> int: ...


class HookMatcher:
    """Match hooks against an operation on a key."""

    def __init__(self, op: OpKind, key: str):
        self.op = op
        self.key = key

    def matches(self, hook: Hook) -> bool:
        # Exact, case-sensitive key match; no patterns
        return hook.run_on == self.op and hook.key == self.key


@dataclass
class HookRun:
    """A matched hook and the command it resolved to (None if missing)."""

    hook: Hook
    command: str | None

    @property
    def bad(self) -> bool:
        return self.command is None


class HookEngine:
    """Add, remove and run hooks against a repository."""

    def __init__(self, repository: StoreRepository, executor: CommandExecutor):
        """
        Initialize engine.

        Args:
            repository: Where the hooks are stored
            executor: Runs the command of a matching hook
        """
        self.repository = repository
        self.executor = executor

    def add_hook(self, name: str, cmd_name: str, run_on: OpKind, key: str) -> Hook:
        """
        Append a new hook and save.

        The command is not checked; a missing command is only reported when
        the hook fires.

        Raises:
            DuplicateHookName: A hook with this name already exists
        """
        store = self.repository.load()
        if store.find_hook(name) is not None:
            raise DuplicateHookName(name)

        hook = Hook(name=name, cmd_name=cmd_name, run_on=run_on, key=key)
        store.hooks.append(hook)
        self.repository.save(store)

        logger.info(f"Added hook {name}: {run_on} {key} -> {cmd_name}")
        return hook

    def remove_hook(self, name: str) -> Hook:
        """
        Remove the hook with this name and save.

        Raises:
            HookNotFound: No hook has this name; nothing is saved
        """
        store = self.repository.load()
        hook = store.find_hook(name)
        if hook is None:
            raise HookNotFound(name)

        store.hooks.remove(hook)
        self.repository.save(store)

        logger.info(f"Removed hook {name}")
        return hook

    def run_hooks(self, key: str, op: OpKind) -> list[HookRun]:
        """
        Dispatch the command of every hook bound to op on key.

        Hooks are read from a fresh load, so they reflect whatever was saved
        last, and run in stored order. A hook whose command is missing is
        skipped and reported in the result.

        Args:
            key: Key the operation was performed on
            op: Operation performed

        Returns:
            One HookRun per matching hook
        """
        store = self.repository.load()
        commands = Registry(store.cmds)
        matcher = HookMatcher(op, key)

        runs: list[HookRun] = []
        for hook in store.hooks:
            if not matcher.matches(hook):
                continue

            command = commands.get(hook.cmd_name)
            runs.append(HookRun(hook=hook, command=command))

            if command is None:
                logger.warning(f"Hook {hook.name} refers to missing command {hook.cmd_name}")
                continue

            self.executor.dispatch(
                command,
                name=hook.cmd_name,
                context={"KV_HOOK_NAME": hook.name, "KV_KEY": key, "KV_OP": str(op)},
            )

        if not runs:
            logger.debug(f"No hooks for {op} {key}")
        return runs
