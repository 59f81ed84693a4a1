# /ethnode/core/paths.py
import os
import sys

import appdirs


def clean_and_expand_path(path: str) -> str:
    """Expands ~ / ~user and returns a clean absolute path.

    Empty input is returned as-is. Applying it twice gives the same result.
    """
    if not path:
        return path
    return os.path.abspath(os.path.expanduser(path))


def app_data_dir(app_name: str) -> str:
    """OS-conventional per-user data directory for *app_name*.

    Windows and macOS use a capitalized name under the platform data folder,
    everything else a dot-directory in the user's home.
    """
    app_name = app_name.lstrip(".")
    if not app_name:
        return "."
    if sys.platform in ("win32", "darwin"):
        return appdirs.user_data_dir(app_name[0].upper() + app_name[1:], appauthor=False)
    return os.path.join(os.path.expanduser("~"), "." + app_name.lower())


def default_ipc_path(home_dir: str) -> str:
    return os.path.join(home_dir, "geth", "geth.ipc")


# Computed once at import; injected into load_config as its default.
ETH_HOME_DIR = app_data_dir("ethereum")
DEFAULT_IPC = default_ipc_path(ETH_HOME_DIR)
