import logging
from typing import Optional, Tuple

from vizshape.config.analyzer_config import AnalyzerConfig
from vizshape.core.shape_detector import ShapeSignals
from vizshape.core.viz_kind import FALLBACK_VIZ, VizKind
from vizshape.recommendation.rules import GATES

logger = logging.getLogger(__name__)


class RecommendationComposer:
    """
    Turns detected signals into an ordered, de-duplicated list of views.

    Gates fire in fixed priority order; a kind is appended the first
    time any gate yields it. An empty result falls back to chart, so
    the list is never empty.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None, gates=GATES):
        self.config = config or AnalyzerConfig()
        self.gates = tuple(gates)

    def compose(self, signals: ShapeSignals) -> Tuple[VizKind, ...]:
        recommended = []

        for gate in self.gates:
            viz = gate(signals, self.config)
            if viz is not None and viz not in recommended:
                recommended.append(viz)

        if not recommended:
            recommended.append(FALLBACK_VIZ)

        logger.debug(
            "Recommended %s for %s records",
            [v.value for v in recommended],
            signals.count,
        )

        return tuple(recommended)


def compose_recommendations(
    signals: ShapeSignals,
    config: Optional[AnalyzerConfig] = None,
) -> Tuple[VizKind, ...]:
    return RecommendationComposer(config).compose(signals)
