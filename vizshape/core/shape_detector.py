"""
Shape detection for experience record collections.

Each signal is measured with one pass over the records:
geographic, temporal, categorical, relational and ranking.
Malformed or missing optional fields are absence of signal,
never an error.
"""

import logging
import math
import numbers
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, FrozenSet, Mapping, Sequence

import numpy as np
import pandas as pd

from vizshape.core.field_resolver import resolve_any, resolve_values

logger = logging.getLogger(__name__)

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)

# "now" / "today" parse in pandas but are not a recorded point in time
_HAS_DIGIT = re.compile(r"\d")


# =====================================================
# SHAPE SIGNALS (DETECTOR OUTPUT)
# =====================================================

@dataclass(frozen=True)
class ShapeSignals:
    """
    Per-signal measurements for a record collection.
    Flags are derived from ratios wherever a ratio exists.
    """
    count: int = 0
    fields: FrozenSet[str] = field(default_factory=frozenset)

    geo_ratio: float = 0.0
    temporal_ratio: float = 0.0
    category_diversity: float = 0.0

    has_categories: bool = False
    has_tags: bool = False
    has_connections: bool = False
    has_rankings: bool = False

    @property
    def has_geo(self) -> bool:
        return self.geo_ratio > 0

    @property
    def has_temporal(self) -> bool:
        return self.temporal_ratio > 0


# -------------------------------------------------
# Value predicates
# -------------------------------------------------
def _is_finite_number(value) -> bool:
    # bool is an int subclass; True is not a score
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(float(value))


def _to_coordinate(value) -> float:
    if not _is_finite_number(value):
        return np.nan
    try:
        return float(value)
    except OverflowError:
        return np.nan


def _is_date_value(value) -> bool:
    if value is pd.NaT:
        return False
    if isinstance(value, np.datetime64):
        return not np.isnat(value)
    return isinstance(value, date)


def _date_text(value):
    if isinstance(value, str) and _HAS_DIGIT.search(value):
        return value.strip()
    return None


def _category_label(value):
    if isinstance(value, str):
        return value.strip() or None
    if _is_finite_number(value):
        return str(value)
    return None


def _is_nonempty_array(value) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


# -------------------------------------------------
# Signal measurements
# -------------------------------------------------
def _geo_valid_count(records: Sequence[Mapping[str, Any]]) -> int:
    lat = resolve_values(records, "latitude").map(_to_coordinate).astype(float)
    lng = resolve_values(records, "longitude").map(_to_coordinate).astype(float)

    valid = lat.between(*LAT_RANGE) & lng.between(*LNG_RANGE)
    return int(valid.sum())


def _temporal_valid_count(records: Sequence[Mapping[str, Any]]) -> int:
    values = resolve_values(records, "date")

    native = values.map(_is_date_value).astype(bool)

    parsed = pd.to_datetime(
        values.map(_date_text),
        errors="coerce",
        format="mixed",
        utc=True,
    )

    return int((native | parsed.notna()).sum())


def _category_labels(records: Sequence[Mapping[str, Any]]) -> pd.Series:
    return resolve_values(records, "category").map(_category_label).dropna()


def _any_nonempty_array(records, semantic_key: str) -> bool:
    return bool(resolve_values(records, semantic_key).map(_is_nonempty_array).any())


def _any_ranking(records) -> bool:
    return any(
        _is_finite_number(value)
        for values in resolve_any(records, "ranking")
        for value in values
    )


# =====================================================
# SHAPE DETECTOR (DETERMINISTIC)
# =====================================================

def detect_signals(
    records: Sequence[Mapping[str, Any]],
    edges: Sequence[Any] = (),
) -> ShapeSignals:
    """
    Measures structural signals of a normalized record sequence.

    Rules:
    - Only the fixed alias lists in SIGNAL_FIELD_MAP are inspected
    - ``fields`` is the key set of the FIRST record, not a union
    - Ratios use the full record count as denominator
    - Graph edges delivered next to the records count as connections
    """

    count = len(records)

    if count == 0:
        return ShapeSignals()

    fields = frozenset(str(k) for k in records[0].keys())

    labels = _category_labels(records)

    signals = ShapeSignals(
        count=count,
        fields=fields,
        geo_ratio=_geo_valid_count(records) / count,
        temporal_ratio=_temporal_valid_count(records) / count,
        category_diversity=labels.nunique() / count,
        has_categories=not labels.empty,
        has_tags=_any_nonempty_array(records, "tags"),
        has_connections=(
            len(edges) > 0 or _any_nonempty_array(records, "connections")
        ),
        has_rankings=_any_ranking(records),
    )

    logger.debug(
        "Detected signals for %s records: geo=%.3f temporal=%.3f "
        "categories=%s connections=%s rankings=%s",
        count,
        signals.geo_ratio,
        signals.temporal_ratio,
        signals.has_categories,
        signals.has_connections,
        signals.has_rankings,
    )

    return signals
