"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = Path(__file__).parent


def load_yaml_config(filename: str) -> Any:
    """Load a YAML file, resolving relative names against the config/ directory."""
    config_path = Path(filename)
    if not config_path.is_absolute():
        config_path = CONFIG_DIR / config_path
    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)
