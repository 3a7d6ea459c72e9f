# src/design_auditor/config.py
import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from design_auditor.errors import ConfigurationError
from design_auditor.utils.config_loader import get_nested_config

logger = logging.getLogger(__name__)

FALLBACK_MAX_FINDINGS = 100
FALLBACK_MAX_DEPTH = 10

# Accepted override keys, including the camelCase spelling used by JSON callers.
_KEY_ALIASES = {
    "max_findings": "max_findings",
    "maxFindings": "max_findings",
    "max_depth": "max_depth",
    "maxDepth": "max_depth",
}


class ReportConfig(BaseModel):
    """Bounds applied to a single report run."""
    model_config = ConfigDict(frozen=True)

    max_findings: int = FALLBACK_MAX_FINDINGS
    max_depth: int = FALLBACK_MAX_DEPTH


def _require_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return value


def load_report_config(overrides: Optional[Union[ReportConfig, Mapping[str, Any]]] = None) -> ReportConfig:
    """
    Builds the effective ReportConfig.

    Defaults come from settings.json (via get_nested_config); ``overrides``
    may be a ReportConfig, used as-is after validation, or a mapping with
    max_findings / max_depth (snake or camel case).

    Raises:
        ConfigurationError: For unknown keys or non-positive / non-integer values.
    """
    if isinstance(overrides, ReportConfig):
        values: Dict[str, Any] = overrides.model_dump()
    else:
        values = {
            "max_findings": get_nested_config("contrast.max_findings", FALLBACK_MAX_FINDINGS),
            "max_depth": get_nested_config("traversal.max_depth", FALLBACK_MAX_DEPTH),
        }
        if overrides is not None:
            if not isinstance(overrides, Mapping):
                raise ConfigurationError(f"config must be a mapping or ReportConfig, got {type(overrides).__name__}")
            for key, value in overrides.items():
                if key not in _KEY_ALIASES:
                    raise ConfigurationError(f"Unknown configuration key: {key}")
                values[_KEY_ALIASES[key]] = value

    config = ReportConfig(
        max_findings=_require_positive_int("max_findings", values["max_findings"]),
        max_depth=_require_positive_int("max_depth", values["max_depth"]),
    )
    logger.debug("Effective report config: %s", config)
    return config
