from typing import List, Tuple, Union

from vizshape.core.analysis import DataStructureAnalysis
from vizshape.core.viz_kind import VizKind, coerce_viz


# =====================================================
# QUERY FACADE (CANONICAL API)
# =====================================================
# Read-only views over an existing analysis. Nothing here
# re-inspects records.

def get_primary_viz(analysis: DataStructureAnalysis) -> VizKind:
    """Default view a renderer should pick absent user override."""
    return analysis.recommended_viz[0]


def is_suitable_for(
    analysis: DataStructureAnalysis,
    viz: Union[VizKind, str],
) -> bool:
    kind = coerce_viz(viz)
    return kind is not None and kind in analysis.recommended_viz


def get_viz_priority_score(
    analysis: DataStructureAnalysis,
    viz: Union[VizKind, str],
) -> float:
    """
    Priority of a view in [0, 1]; higher = better fit.

    The primary view scores 1.0, each later view 1 / (index + 1),
    views that are not recommended score 0.0.
    """
    if not is_suitable_for(analysis, viz):
        return 0.0

    index = analysis.recommended_viz.index(coerce_viz(viz))
    return 1.0 / (index + 1)


def rank_visualizations(
    analysis: DataStructureAnalysis,
) -> List[Tuple[VizKind, float]]:
    """
    Every VizKind with its priority score, for a UI picker.

    Recommended views come first in priority order; the rest
    follow in VizKind declaration order with score 0.0.
    """
    ranked = [(viz, get_viz_priority_score(analysis, viz))
              for viz in analysis.recommended_viz]

    ranked.extend(
        (viz, 0.0) for viz in VizKind if viz not in analysis.recommended_viz
    )
    return ranked


def suggests_dashboard(analysis: DataStructureAnalysis) -> bool:
    # Several competing views: a multi-panel layout beats picking one
    return len(analysis.recommended_viz) >= 2
