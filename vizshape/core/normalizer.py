from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Mapping as MappingT, Tuple

import pandas as pd

from vizshape.core.errors import InvalidInputError


# -------------------------------------------------
# Wrapper keys used by upstream API responses.
# Tried in order; the first one holding a sequence wins.
# -------------------------------------------------
WRAPPER_KEYS = (
    "results",
    "experiences",
    "users",
    "connections",
    "periods",
    "nodes",
)

# Graph payloads: {"nodes": [...], "edges": [...]}
GRAPH_EDGE_KEY = "edges"

_EMPTY_RECORD: MappingT[str, Any] = {}


@dataclass(frozen=True)
class NormalizedCollection:
    """Record rows plus any edges carried next to them by a graph payload."""
    records: Tuple[MappingT[str, Any], ...]
    edges: Tuple[Any, ...] = ()


def _is_sequence_like(value) -> bool:
    return (
        isinstance(value, Iterable)
        and not isinstance(value, (str, bytes, bytearray, Mapping))
    )


def _as_record(item) -> MappingT[str, Any]:
    # Non-mapping rows carry no signal
    return item if isinstance(item, Mapping) else _EMPTY_RECORD


def _from_dataframe(df: pd.DataFrame) -> Tuple[MappingT[str, Any], ...]:
    if df is None or len(df) == 0:
        return ()
    # rows without columns still count as (empty) records
    if len(df.columns) == 0:
        return tuple({} for _ in range(len(df)))
    return tuple(df.to_dict(orient="records"))


def normalize_collection(collection) -> NormalizedCollection:
    """
    Unwrap an input collection into a tuple of records.

    Accepted shapes:
    - list / tuple / any non-string iterable of records
    - {"results": [...]} and the other WRAPPER_KEYS
    - {"nodes": [...], "edges": [...]} graph payloads
    - pandas DataFrame (one record per row)

    The caller's object is never modified; iterables are
    materialized exactly once.
    """

    if isinstance(collection, pd.DataFrame):
        return NormalizedCollection(records=_from_dataframe(collection))

    if isinstance(collection, Mapping):
        for key in WRAPPER_KEYS:
            rows = collection.get(key)
            if _is_sequence_like(rows):
                edges = collection.get(GRAPH_EDGE_KEY)
                return NormalizedCollection(
                    records=tuple(_as_record(r) for r in rows),
                    edges=tuple(edges) if _is_sequence_like(edges) else (),
                )

        raise InvalidInputError(
            "Mapping input must carry a record sequence under one of "
            f"{', '.join(WRAPPER_KEYS)}; got keys {sorted(map(str, collection))}"
        )

    if _is_sequence_like(collection):
        return NormalizedCollection(
            records=tuple(_as_record(r) for r in collection)
        )

    raise InvalidInputError(
        f"Expected a sequence of records or a wrapper object, "
        f"got {type(collection).__name__}"
    )
