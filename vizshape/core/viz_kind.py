from enum import Enum
from typing import Union


# =====================================================
# VISUALIZATION KIND ENUM
# =====================================================

class VizKind(str, Enum):
    """
    Closed set of views a renderer knows how to draw.

    Adding a member requires a matching gate in
    ``vizshape.recommendation.rules``; nothing here decides order.
    """
    MAP = "map"
    NETWORK = "network"
    HEATMAP = "heatmap"
    TIMELINE = "timeline"
    CHART = "chart"


# Universal fallback when a dataset has no structural signal
FALLBACK_VIZ = VizKind.CHART


def coerce_viz(viz: Union[VizKind, str]):
    """
    Returns the VizKind for a member or its string value, else None.

    Unknown strings are not an error: callers ask "is this view
    suitable?" with whatever identifier their UI uses.
    """
    if isinstance(viz, VizKind):
        return viz

    try:
        return VizKind(viz)
    except (ValueError, TypeError):
        return None
