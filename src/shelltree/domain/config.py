from __future__ import annotations

"""
Configuration Domain Management.

Provides the default query settings and loads user overrides from a JSON
file. Unknown keys are ignored; values are normalized by the validator.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from shelltree.domain.constants import (
    DEFAULT_CAPACITY,
    DEFAULT_CEILING,
    DEFAULT_HEADROOM,
    DEFAULT_MAX_DEPTH,
)
from shelltree.infra.fs import get_default_config_path

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("ceiling", "capacity", "headroom", "max_depth")

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Bounded-sum query
        "ceiling": DEFAULT_CEILING,

        # Minimal-sufficient query
        "capacity": DEFAULT_CAPACITY,
        "headroom": DEFAULT_HEADROOM,

        # Parser safety
        "max_depth": DEFAULT_MAX_DEPTH,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from disk.

    Args:
        path: JSON file to read. Defaults to the user-level config file.

    Returns:
        Dict[str, Any]: Defaults merged with the known keys found in the file.
    """
    config = get_default_config()
    config_path = path or get_default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{config_path}' is not a JSON object. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    ignored = sorted(set(data) - set(CONFIG_KEYS))
    if ignored:
        logger.debug(f"Ignoring unknown config keys: {', '.join(ignored)}")

    return config
