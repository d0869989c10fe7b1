from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd


# =====================================================
# SIGNAL FIELD MAP
# =====================================================
# Explicit, ordered alias lists. Only these keys are ever inspected;
# there is no schema inference over arbitrary record keys.

SIGNAL_FIELD_MAP: Dict[str, List[str]] = {
    # ---------- Geographic ----------
    "latitude": ["location_lat", "lat", "latitude"],
    "longitude": ["location_lng", "lng", "lon", "longitude"],

    # ---------- Temporal ----------
    "date": [
        "date_occurred",
        "date",
        "created_at",
        "updated_at",
        "timestamp",
        "period",
        "month",
    ],

    # ---------- Categorical ----------
    "category": ["category"],
    "tags": ["tags"],

    # ---------- Relational ----------
    "connections": ["connections", "related", "edges"],

    # ---------- Ranking ----------
    "ranking": [
        "score",
        "rank",
        "count",
        "total",
        "experience_count",
        "total_xp",
        "confidence",
        "similarity_score",
    ],
}


def _is_missing(value) -> bool:
    # DataFrame rows carry NaN / NaT where a dict would omit the key
    return (
        value is None
        or value is pd.NaT
        or (isinstance(value, float) and value != value)
    )


def _first_present(record: Mapping[str, Any], aliases: List[str]):
    for alias in aliases:
        value = record.get(alias)
        if not _is_missing(value):
            return value
    return None


def resolve_values(
    records: Sequence[Mapping[str, Any]],
    semantic_key: str,
) -> pd.Series:
    """
    Resolve a semantic signal to one value per record.

    Resolution strategy:
    1. Walk the alias list of the semantic key in order
    2. First non-null alias value wins
    3. Records with no alias yield None

    Returns an object-dtype Series aligned with ``records`` so values
    keep their original Python types (no numeric or date coercion).
    """
    aliases = SIGNAL_FIELD_MAP[semantic_key]

    return pd.Series(
        [_first_present(record, aliases) for record in records],
        dtype=object,
    )


def resolve_any(
    records: Sequence[Mapping[str, Any]],
    semantic_key: str,
) -> List[List[Any]]:
    """
    Every non-null alias value per record.

    Used by signals where a later alias may carry the signal even when
    an earlier one is present but unusable (e.g. ``score: "n/a"`` next
    to ``rank: 3``).
    """
    aliases = SIGNAL_FIELD_MAP[semantic_key]

    return [
        [record[a] for a in aliases if not _is_missing(record.get(a))]
        for record in records
    ]
