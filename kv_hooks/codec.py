"""
Store codec.

Converts the store to and from its JSON text. Decoding never fails: a
missing, empty or damaged document becomes an empty store.
"""

import json
import logging

from kv_hooks.errors import InvalidOpKind
from kv_hooks.models import Store

logger = logging.getLogger(__name__)


def decode(data: bytes | str | None) -> Store:
    """
    Parse stored bytes into a Store.

    Args:
        data: File contents, or None when there is no file

    Returns:
        The parsed store, or an empty store if the contents are unusable
    """
    if data is None:
        return Store()

    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Store is not valid UTF-8, starting empty: {e}")
            return Store()

    if not data.strip():
        return Store()

    try:
        return Store.from_dict(json.loads(data))
    except (json.JSONDecodeError, RecursionError, KeyError, TypeError, InvalidOpKind) as e:
        logger.warning(f"Store is corrupt, starting empty: {e}")
        return Store()


def encode(store: Store) -> bytes:
    """Serialize a Store as pretty-printed UTF-8 JSON."""
    text = json.dumps(store.to_dict(), indent=2, ensure_ascii=False)
    return text.encode("utf-8")
