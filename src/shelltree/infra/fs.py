from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory and reads transcripts from disk or
standard input.
"""

import os
import sys

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ShellTree"
UNIX_APP_DIR_NAME = ".shelltree"
CONFIG_FILE_NAME = "config.json"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/ShellTree
    - Linux/Mac: ~/.shelltree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def get_default_config_path() -> str:
    """Absolute path of the user-level configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# TRANSCRIPT INPUT
# -----------------------------------------------------------------------------

def read_transcript(path: str) -> str:
    """
    Read a transcript from `path`, or from stdin when `path` is '-'.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    if path == STDIN_MARKER:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
