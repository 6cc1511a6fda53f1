"""
Shell executor for named commands.

Starts commands through the user's shell and returns at once. The caller
never waits for a command, reads its output or checks its exit status.
"""

import logging
import os
import subprocess
from collections.abc import Mapping

from kv_hooks.errors import CommandDispatchError

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "bash"


class ShellExecutor:
    """Dispatch command strings to a shell, fire-and-forget."""

    def __init__(self, shell: str | None = None, env: Mapping[str, str] | None = None):
        """
        Initialize executor.

        Args:
            shell: Shell to run commands with. Defaults to $SHELL, then bash
            env: Base environment for commands, defaults to os.environ
        """
        self.env = dict(os.environ if env is None else env)
        self.shell = shell or self.env.get("SHELL") or DEFAULT_SHELL

    def dispatch(
        self, command: str, *, name: str, context: Mapping[str, str] | None = None
    ) -> int:
        """
        Start a command without waiting for it.

        Args:
            command: Command text, interpreted by the shell
            name: Name of the command, used in the environment and errors
            context: Extra environment variables for this command

        Returns:
            Process id of the started shell

        Raises:
            CommandDispatchError: The shell could not be started
        """
        env = self._prepare_environment(name, context)

        try:
            proc = subprocess.Popen(
                [self.shell, "-c", command],
                stdin=subprocess.DEVNULL,
                env=env,
                start_new_session=True,
            )
        except OSError as e:
            raise CommandDispatchError(
                f"Error! Failed to run '{name}' with error:\n {e}"
            ) from e

        logger.info(f"Dispatched '{name}' as pid {proc.pid}: {command}")
        return proc.pid

    def _prepare_environment(
        self, name: str, context: Mapping[str, str] | None
    ) -> dict[str, str]:
        """
        Prepare environment variables for a command.

        Returns:
            The base environment plus KV_CMD_NAME and any context values
        """
        env = dict(self.env)
        env["KV_CMD_NAME"] = name
        if context:
            env.update(context)
        return env
