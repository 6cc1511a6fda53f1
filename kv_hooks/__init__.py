"""
kv: a key/value store with shell hooks

Keys, named shell commands and hooks live in one JSON file. Hooks run a
named command whenever a key is read, written or deleted.
"""

__version__ = "0.1.0"

from kv_hooks.dispatcher import Dispatcher, Request, RequestKind
from kv_hooks.engine import HookEngine, HookRun
from kv_hooks.executor import ShellExecutor
from kv_hooks.models import Hook, OpKind, Store
from kv_hooks.repository import JsonFileRepository, MemoryRepository

__all__ = [
    "Dispatcher",
    "Request",
    "RequestKind",
    "HookEngine",
    "HookRun",
    "ShellExecutor",
    "Hook",
    "OpKind",
    "Store",
    "JsonFileRepository",
    "MemoryRepository",
]
