import os
from typing import Any, Dict

import yaml

from csv2pydantic.utils.exceptions import ConfigError

# Keys a YAML options file may set; each mirrors a CLI flag
OPTION_KEYS = (
    "name",
    "delimiter",
    "lines",
    "min_fields",
    "blank_lines",
    "output",
    "force",
)


def load_options(config_path: str) -> Dict[str, Any]:
    """
    Load run options from a YAML mapping.

    Example:
        name: DailyScores
        delimiter: ";"
        lines: 1000
        min_fields: 1
        blank_lines: 0
    """
    if not os.path.exists(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            options = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse config file {config_path}: {e}") from e

    if options is None:
        return {}
    if not isinstance(options, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    unknown = sorted(set(options) - set(OPTION_KEYS))
    if unknown:
        raise ConfigError(
            f"Unknown option(s) in {config_path}: {unknown}. "
            f"Allowed: {list(OPTION_KEYS)}"
        )
    return options
