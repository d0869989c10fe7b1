import copy
from pathlib import Path
from typing import Optional

import yaml

from .defaults import DEFAULT_CONFIG
from vizshape.config.analyzer_config import AnalyzerConfig


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: Optional[str]) -> dict:
    """
    Load and merge user config with package defaults.

    Sections:
    - ``analyzer``: gate tunables, turned into AnalyzerConfig
      (``heatmap_min_records``, validated there, not here)
    - ``output``: CLI rendering only (``indent`` for the JSON dump)

    Each section is merged key-by-key over DEFAULT_CONFIG, so a file
    that sets only ``analyzer.heatmap_min_records`` keeps
    ``output.indent``. No path means pure defaults.
    """

    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    return config


# -------------------------------------------------
# ANALYZER CONFIG LOADER
# -------------------------------------------------
def load_analyzer_config(path: Optional[str]) -> AnalyzerConfig:
    return AnalyzerConfig.from_dict(load_config(path).get("analyzer"))
