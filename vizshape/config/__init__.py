from .loader import load_config, load_analyzer_config
from .defaults import DEFAULT_CONFIG
from .analyzer_config import AnalyzerConfig

__all__ = [
    "load_config",
    "load_analyzer_config",
    "DEFAULT_CONFIG",
    "AnalyzerConfig",
]
