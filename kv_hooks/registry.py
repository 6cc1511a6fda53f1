"""Named text values, used for both user keys and named commands."""

from collections.abc import Iterator


class Registry:
    """View over one name -> text map of a Store. Changes go to that map."""

    def __init__(self, entries: dict[str, str]):
        self.entries = entries

    def get(self, name: str) -> str | None:
        return self.entries.get(name)

    def set(self, name: str, value: str) -> None:
        self.entries[name] = value

    def delete(self, name: str) -> str | None:
        """Remove name and return its value, or None if it was not there."""
        return self.entries.pop(name, None)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (name, value) pairs sorted by name."""
        for name in sorted(self.entries):
            yield name, self.entries[name]
