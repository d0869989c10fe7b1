from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from vizshape.core.shape_detector import ShapeSignals
from vizshape.core.viz_kind import FALLBACK_VIZ, VizKind


@dataclass(frozen=True)
class DataStructureAnalysis:
    """
    Structural fingerprint of a record collection plus the ordered
    views it supports. Immutable; compare by value.
    """
    count: int = 0
    fields: FrozenSet[str] = field(default_factory=frozenset)

    has_geo: bool = False
    geo_ratio: float = 0.0

    has_temporal: bool = False
    temporal_ratio: float = 0.0

    has_categories: bool = False
    category_diversity: float = 0.0

    has_tags: bool = False
    has_connections: bool = False
    has_rankings: bool = False

    recommended_viz: Tuple[VizKind, ...] = (FALLBACK_VIZ,)

    def __post_init__(self):
        # get_primary_viz relies on a first element always existing
        if not self.recommended_viz:
            raise ValueError("recommended_viz must contain at least one VizKind")

    @classmethod
    def from_signals(
        cls,
        signals: ShapeSignals,
        recommended_viz: Tuple[VizKind, ...],
    ) -> "DataStructureAnalysis":
        return cls(
            count=signals.count,
            fields=signals.fields,
            has_geo=signals.has_geo,
            geo_ratio=signals.geo_ratio,
            has_temporal=signals.has_temporal,
            temporal_ratio=signals.temporal_ratio,
            has_categories=signals.has_categories,
            category_diversity=signals.category_diversity,
            has_tags=signals.has_tags,
            has_connections=signals.has_connections,
            has_rankings=signals.has_rankings,
            recommended_viz=tuple(recommended_viz) or (FALLBACK_VIZ,),
        )
