"""Aligned tables for the list command."""

from collections.abc import Iterable, Sequence

from kv_hooks.models import Store
from kv_hooks.registry import Registry

COLUMN_SEPARATOR = "--"
SECTION_SEPARATOR = "-------------------"


def format_table(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """
    Lay out cells in columns joined by "--".

    Each column except the last is padded to its widest cell plus two
    spaces, the way an elastic tab writer aligns them.
    """
    lines: list[list[str]] = []
    for row in [header, *rows]:
        cells: list[str] = []
        for i, cell in enumerate(row):
            if i:
                cells.append(COLUMN_SEPARATOR)
            cells.append(cell)
        lines.append(cells)

    widths: dict[int, int] = {}
    for cells in lines:
        for i, cell in enumerate(cells[:-1]):
            widths[i] = max(widths.get(i, 0), len(cell))

    out = []
    for cells in lines:
        padded = [cell.ljust(widths[i] + 2) for i, cell in enumerate(cells[:-1])]
        out.append("".join(padded + cells[-1:]))
    return "\n".join(out)


def format_entries(entries: Registry) -> str:
    return format_table(("Key", "Value"), entries.items())


def format_hooks(store: Store) -> str:
    rows = [(h.name, h.cmd_name, str(h.run_on), h.key) for h in store.hooks]
    return format_table(("Hook Name", "Cmd Name", "Trigger", "Key"), rows)


def format_all(store: Store) -> str:
    """Keys, commands and hooks, separated by a dashed line."""
    return "\n".join(
        [
            format_entries(Registry(store.kvs)),
            SECTION_SEPARATOR,
            format_entries(Registry(store.cmds)),
            SECTION_SEPARATOR,
            format_hooks(store),
        ]
    )
