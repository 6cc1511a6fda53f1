"""Tests for store path resolution."""

import sys
from unittest.mock import patch

import pytest

from kv_hooks import paths
from kv_hooks.errors import StoreLocationError


@pytest.fixture
def linux():
    with patch.object(sys, "platform", "linux"):
        yield


def test_config_dir_xdg(tmp_path, linux):
    env = {"HOME": "/home/user", "XDG_CONFIG_HOME": str(tmp_path)}

    assert paths.config_dir(env) == tmp_path


def test_config_dir_relative_xdg_ignored(linux):
    env = {"HOME": "/home/user", "XDG_CONFIG_HOME": "relative/dir"}

    assert str(paths.config_dir(env)) == "/home/user/.config"


def test_config_dir_home_fallback(linux):
    assert str(paths.config_dir({"HOME": "/home/user"})) == "/home/user/.config"


def test_config_dir_unresolvable(linux):
    assert paths.config_dir({}) is None


def test_config_dir_macos():
    with patch.object(sys, "platform", "darwin"):
        result = paths.config_dir({"HOME": "/Users/me"})

    assert str(result) == "/Users/me/Library/Application Support"


def test_config_dir_windows():
    with patch.object(sys, "platform", "win32"):
        assert str(paths.config_dir({"APPDATA": "C:/Users/me/AppData/Roaming"})).endswith("Roaming")
        assert paths.config_dir({}) is None


def test_store_path_creates_directory(tmp_path, linux):
    env = {"HOME": "/nonexistent", "XDG_CONFIG_HOME": str(tmp_path)}

    path = paths.store_path(env)

    assert path == tmp_path / "kv" / "kv.json"
    assert path.parent.is_dir()


def test_store_path_logs_creation(tmp_path, linux, caplog):
    env = {"XDG_CONFIG_HOME": str(tmp_path)}

    with caplog.at_level("INFO", logger="kv_hooks.paths"):
        paths.store_path(env)

    assert "Created config dir path" in caplog.text


def test_store_path_existing_directory(tmp_path, linux):
    (tmp_path / "kv").mkdir()

    assert paths.store_path({"XDG_CONFIG_HOME": str(tmp_path)}) == tmp_path / "kv" / "kv.json"


def test_store_path_unresolvable(linux):
    with pytest.raises(StoreLocationError, match="Cannot find the config directory"):
        paths.store_path({})


def test_store_path_cannot_create(tmp_path, linux):
    """Test a directory that cannot be created is fatal."""
    blocker = tmp_path / "file"
    blocker.write_text("")

    with pytest.raises(StoreLocationError, match="Cannot create path"):
        paths.store_path({"XDG_CONFIG_HOME": str(blocker)})


def test_store_path_override(tmp_path):
    target = tmp_path / "custom" / "store.json"

    assert paths.store_path({"KV_STORE_PATH": str(target)}) == target
    assert target.parent.is_dir()
