"""
Data structure analyzer.

Single computing entry point: normalize the collection, detect
signals, compose recommendations. Pure and deterministic.
"""

import logging
from typing import Optional

from vizshape.config.analyzer_config import AnalyzerConfig
from vizshape.core.analysis import DataStructureAnalysis
from vizshape.core.normalizer import normalize_collection
from vizshape.core.shape_detector import detect_signals
from vizshape.recommendation.composer import RecommendationComposer

logger = logging.getLogger(__name__)


def analyze_data_structure(
    collection,
    config: Optional[AnalyzerConfig] = None,
) -> DataStructureAnalysis:
    """
    Analyze a record collection and recommend visualizations.

    Args:
        collection: list of records, ``{"results": [...]}`` style
            wrapper, graph payload, or pandas DataFrame
        config: optional gate tunables; defaults need no configuration

    Returns:
        Immutable DataStructureAnalysis

    Raises:
        InvalidInputError: collection cannot be unwrapped into records
    """

    normalized = normalize_collection(collection)

    signals = detect_signals(normalized.records, normalized.edges)
    recommended = RecommendationComposer(config).compose(signals)

    return DataStructureAnalysis.from_signals(signals, recommended)
