from __future__ import annotations

"""
Domain Constants.

Centralizes the grammar literals of the transcript format and the default
thresholds used by the size queries.
"""

# -----------------------------------------------------------------------------
# TRANSCRIPT GRAMMAR
# -----------------------------------------------------------------------------

COMMAND_PROMPT = "$"
CD_COMMAND = "$ cd"
LS_COMMAND = "$ ls"
DIR_PREFIX = "dir"
ASCENT_MARKER = ".."
ROOT_NAME = "/"

# -----------------------------------------------------------------------------
# QUERY DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_CEILING = 100_000
DEFAULT_CAPACITY = 70_000_000
DEFAULT_HEADROOM = 30_000_000

# Python frames per nesting level stay well below the interpreter limit
DEFAULT_MAX_DEPTH = 256
