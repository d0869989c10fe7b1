"""Core engine - input normalization, shape detection, analysis value."""

from .analysis import DataStructureAnalysis
from .errors import ConfigError, InvalidInputError, VizShapeError
from .normalizer import normalize_collection
from .shape_detector import ShapeSignals, detect_signals
from .viz_kind import VizKind

__all__ = [
    "DataStructureAnalysis",
    "ConfigError",
    "InvalidInputError",
    "VizShapeError",
    "normalize_collection",
    "ShapeSignals",
    "detect_signals",
    "VizKind",
]
