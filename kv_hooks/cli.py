"""
Command line interface for kv.

Parses arguments into a Request, wires the file repository, hook engine and
shell executor together and turns errors into exit statuses.
"""

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from kv_hooks import __version__
from kv_hooks.dispatcher import Dispatcher, Request, RequestKind
from kv_hooks.engine import HookEngine
from kv_hooks.errors import InvalidOpKind, KvError
from kv_hooks.executor import ShellExecutor
from kv_hooks.models import OpKind
from kv_hooks.paths import store_path
from kv_hooks.repository import JsonFileRepository

LIST_SUBJECTS = {
    None: RequestKind.LIST_ALL,
    "keys": RequestKind.LIST_KEYS,
    "cmds": RequestKind.LIST_COMMANDS,
    "hooks": RequestKind.LIST_HOOKS,
}


def _op_kind(token: str) -> OpKind:
    try:
        return OpKind.parse(token)
    except InvalidOpKind as e:
        raise argparse.ArgumentTypeError(e.message) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kv", description="A key/value store with shell hooks"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)"
    )
    parser.add_argument(
        "--store", type=Path, help="Store file (default: <config dir>/kv/kv.json)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="Print the value of a key")
    get_parser.add_argument("key")

    set_parser = subparsers.add_parser("set", help="Set the value of a key")
    set_parser.add_argument("key")
    set_parser.add_argument("val")

    del_parser = subparsers.add_parser("del", help="Delete a key and print its value")
    del_parser.add_argument("key")

    list_parser = subparsers.add_parser("list", help="List keys, commands or hooks")
    list_parser.add_argument("to_list", nargs="?", choices=["keys", "cmds", "hooks"])

    cmd_parser = subparsers.add_parser("cmd", help="Manage named commands and hooks")
    cmd_subparsers = cmd_parser.add_subparsers(dest="cmd_command", required=True)

    run_parser = cmd_subparsers.add_parser("run", help="Run a named command")
    run_parser.add_argument("cmd_name")

    add_parser = cmd_subparsers.add_parser("add", help="Add or replace a named command")
    add_parser.add_argument("cmd_name")
    add_parser.add_argument("cmd_value")

    hook_parser = cmd_subparsers.add_parser(
        "add-hook", help="Run a command on get/set/del of a key"
    )
    hook_parser.add_argument("hook_name")
    hook_parser.add_argument("cmd_name")
    hook_parser.add_argument("run_on", type=_op_kind, metavar="{get,set,del}")
    hook_parser.add_argument("key")

    del_hook_parser = cmd_subparsers.add_parser("del-hook", help="Remove a hook")
    del_hook_parser.add_argument("hook_name")

    return parser


def to_request(args: argparse.Namespace) -> Request:
    """Translate parsed arguments into a Request."""
    if args.command == "get":
        return Request(RequestKind.GET, key=args.key)
    if args.command == "set":
        return Request(RequestKind.SET, key=args.key, value=args.val)
    if args.command == "del":
        return Request(RequestKind.DELETE, key=args.key)
    if args.command == "list":
        return Request(LIST_SUBJECTS[args.to_list])

    if args.cmd_command == "run":
        return Request(RequestKind.RUN_COMMAND, name=args.cmd_name)
    if args.cmd_command == "add":
        return Request(RequestKind.ADD_COMMAND, name=args.cmd_name, value=args.cmd_value)
    if args.cmd_command == "add-hook":
        return Request(
            RequestKind.ADD_HOOK,
            name=args.hook_name,
            cmd_name=args.cmd_name,
            run_on=args.run_on,
            key=args.key,
        )
    return Request(RequestKind.REMOVE_HOOK, name=args.hook_name)


def configure_logging(verbosity: int) -> None:
    """Log to stderr. KV_LOG_LEVEL wins over -v."""
    level_name = os.environ.get("KV_LOG_LEVEL")
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """
    Run kv.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]
        out: Where results are printed, defaults to stdout

    Returns:
        Exit status
    """
    if out is None:
        out = sys.stdout
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        path = args.store if args.store else store_path()
        repository = JsonFileRepository(path)
        executor = ShellExecutor()
        engine = HookEngine(repository, executor)
        dispatcher = Dispatcher(repository, engine, executor, out)
        return dispatcher.handle(to_request(args))
    except KvError as e:
        print(e.message, file=out)
        return 1 if e.fatal else 0


if __name__ == "__main__":
    sys.exit(main())
