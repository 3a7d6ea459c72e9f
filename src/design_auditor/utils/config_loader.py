# src/design_auditor/utils/config_loader.py
import copy
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from design_auditor.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def load_settings() -> Dict[str, Any]:
    """
    Loads the packaged defaults from settings.json, once per process.

    The cached dictionary is never handed out directly; callers go through
    get_nested_config, which returns copies.
    """
    config_path = PathUtils.get_settings_file()
    if not config_path.exists():
        logger.warning("Configuration file 'settings.json' not found at %s. Using empty config.", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Failed to load settings.json: %s", e, exc_info=True)
        return {}


def get_nested_config(key_path: str, default: Optional[Any] = None) -> Any:
    """
    Safely retrieves a nested value from the packaged settings.

    Uses a dot as a separator, e.g., 'contrast.max_findings'.

    Args:
        key_path (str): The dotted path to the configuration value.
        default (Any, optional): Returned if the key is not found.

    Returns:
        Any: A copy of the configuration value, or the provided default.
    """
    value: Any = load_settings()

    for key in key_path.split('.'):
        if isinstance(value, dict):
            value = value.get(key)
        else:
            return default

    return copy.deepcopy(value) if value is not None else default
