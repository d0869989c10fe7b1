"""
vizshape

Zero-configuration visualization recommendations for
semi-structured experience records.
"""

from .__version__ import __version__

from .analyzer import analyze_data_structure
from .config import AnalyzerConfig, load_analyzer_config, load_config
from .core import (
    ConfigError,
    DataStructureAnalysis,
    InvalidInputError,
    VizKind,
    VizShapeError,
)
from .core.fingerprint import analysis_fingerprint
from .core.snapshot import analysis_to_dict
from .query import (
    get_primary_viz,
    get_viz_priority_score,
    is_suitable_for,
    rank_visualizations,
    suggests_dashboard,
)

__all__ = [
    "__version__",
    "analyze_data_structure",
    "get_primary_viz",
    "is_suitable_for",
    "get_viz_priority_score",
    "rank_visualizations",
    "suggests_dashboard",
    "analysis_to_dict",
    "analysis_fingerprint",
    "DataStructureAnalysis",
    "VizKind",
    "AnalyzerConfig",
    "load_config",
    "load_analyzer_config",
    "VizShapeError",
    "InvalidInputError",
    "ConfigError",
]
