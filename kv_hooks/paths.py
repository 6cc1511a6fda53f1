"""Location of the store file."""

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from kv_hooks.errors import StoreLocationError

logger = logging.getLogger(__name__)

STORE_DIR_NAME = "kv"
STORE_FILE_NAME = "kv.json"


def config_dir(env: Mapping[str, str] | None = None) -> Path | None:
    """
    Return the per-user configuration directory for this platform.

    Args:
        env: Environment to read, defaults to os.environ

    Returns:
        The directory, or None if it cannot be determined
    """
    env = os.environ if env is None else env

    if sys.platform == "win32":
        appdata = env.get("APPDATA")
        return Path(appdata) if appdata else None

    home = env.get("HOME")
    if sys.platform == "darwin":
        return Path(home) / "Library" / "Application Support" if home else None

    # XDG only honours absolute paths
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path(home) / ".config" if home else None


def store_path(env: Mapping[str, str] | None = None) -> Path:
    """
    Resolve <config dir>/kv/kv.json, creating the kv directory if needed.

    KV_STORE_PATH in the environment replaces the whole path.

    Raises:
        StoreLocationError: The directory cannot be resolved or created
    """
    env = os.environ if env is None else env

    override = env.get("KV_STORE_PATH")
    if override:
        path = Path(override).expanduser()
        ensure_parent(path)
        return path

    base = config_dir(env)
    if base is None:
        raise StoreLocationError("Error! Cannot find the config directory!")

    path = base / STORE_DIR_NAME / STORE_FILE_NAME
    ensure_parent(path)
    return path


def ensure_parent(path: Path) -> None:
    """Create the parent directory of path if it does not exist."""
    parent = path.parent
    if parent.exists():
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreLocationError(f"Error! Cannot create path {parent}, error {e}") from e
    logger.info(f"Created config dir path {parent}")
