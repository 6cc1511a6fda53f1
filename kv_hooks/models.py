"""
Data model for the kv store.

Translates between the in-memory Store and the plain dictionaries kept in
the JSON file.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from kv_hooks.errors import InvalidOpKind


class OpKind(Enum):
    """Operation that can trigger a hook."""

    GET = "get"
    SET = "set"
    DEL = "del"

    @classmethod
    def parse(cls, token: str) -> "OpKind":
        """
        Map a canonical lowercase token to its operation.

        Args:
            token: One of "get", "set" or "del"

        Returns:
            The matching OpKind

        Raises:
            InvalidOpKind: For any other token, including other casings
        """
        for op in cls:
            if op.value == token:
                return op
        raise InvalidOpKind(token)

    def __str__(self) -> str:
        return self.value


@dataclass
class Hook:
    """Binds an operation on a key to a named command."""

    name: str
    cmd_name: str
    run_on: OpKind
    key: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "cmd_name": self.cmd_name,
            "run_on": str(self.run_on),
            "key": self.key,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Hook":
        """
        Build a hook from its stored form.

        Raises:
            KeyError: A field is missing
            TypeError: A field is not a string
            InvalidOpKind: run_on is not a known token
        """
        fields = {}
        for name in ("name", "cmd_name", "run_on", "key"):
            value = data[name]
            if not isinstance(value, str):
                raise TypeError(f"Hook field '{name}' must be a string")
            fields[name] = value
        fields["run_on"] = OpKind.parse(fields["run_on"])
        return cls(**fields)


@dataclass
class Store:
    """Everything that is persisted: user keys, named commands and hooks."""

    kvs: dict[str, str] = field(default_factory=dict)
    cmds: dict[str, str] = field(default_factory=dict)
    hooks: list[Hook] = field(default_factory=list)

    def find_hook(self, name: str) -> Hook | None:
        for hook in self.hooks:
            if hook.name == name:
                return hook
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kvs": dict(self.kvs),
            "cmds": dict(self.cmds),
            "hooks": [hook.to_dict() for hook in self.hooks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Store":
        """
        Build a store from parsed JSON.

        Missing sections default to empty. Anything of the wrong shape raises
        TypeError, KeyError or InvalidOpKind.
        """
        if not isinstance(data, dict):
            raise TypeError("Store root must be an object")

        kvs = _string_map(data.get("kvs", {}), "kvs")
        cmds = _string_map(data.get("cmds", {}), "cmds")

        raw_hooks = data.get("hooks", [])
        if not isinstance(raw_hooks, list):
            raise TypeError("'hooks' must be a list")
        hooks = []
        for raw in raw_hooks:
            if not isinstance(raw, dict):
                raise TypeError("Each hook must be an object")
            hooks.append(Hook.from_dict(raw))

        return cls(kvs=kvs, cmds=cmds, hooks=hooks)


def _string_map(value: Any, section: str) -> dict[str, str]:
    if not isinstance(value, dict):
        raise TypeError(f"'{section}' must be an object")
    for key, item in value.items():
        if not isinstance(item, str):
            raise TypeError(f"'{section}.{key}' must be a string")
    return dict(value)
