"""Configuration loader for runtime game settings."""

import json
import logging
import os
from typing import NamedTuple

from config import CONFIG_PATH, DEFAULT_MAP_PATH

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameRuntimeConfig(NamedTuple):
    map_path: str = DEFAULT_MAP_PATH
    log_level: str = "INFO"
    show_debug: bool = False


def load_runtime_config(config_path: str = CONFIG_PATH) -> GameRuntimeConfig:
    """Load runtime settings (map_path, log_level, show_debug) with safe defaults."""
    defaults = GameRuntimeConfig()
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return defaults

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Error loading config: %s, using defaults", e)
        return defaults

    cfg = data.get('game_config', {}) if isinstance(data, dict) else {}
    if not isinstance(cfg, dict):
        logger.warning("Config section 'game_config' is not an object, using defaults")
        return defaults

    map_path = cfg.get('map_path', defaults.map_path)
    if not isinstance(map_path, str) or not map_path:
        logger.warning("Invalid map_path %r, using %s", map_path, defaults.map_path)
        map_path = defaults.map_path
    elif not os.path.isabs(map_path):
        # Relative map paths are relative to the config file, not the cwd
        config_dir = os.path.dirname(os.path.abspath(config_path))
        map_path = os.path.normpath(os.path.join(config_dir, map_path))

    # normalize log_level
    log_level = str(cfg.get('log_level', defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        logger.warning("Invalid log_level %r, using %s", log_level, defaults.log_level)
        log_level = defaults.log_level

    show_debug = cfg.get('show_debug', defaults.show_debug)
    if not isinstance(show_debug, bool):
        logger.warning("Invalid show_debug %r, using %s", show_debug, defaults.show_debug)
        show_debug = defaults.show_debug

    return GameRuntimeConfig(map_path=map_path, log_level=log_level, show_debug=show_debug)
