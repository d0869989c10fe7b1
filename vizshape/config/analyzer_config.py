from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from vizshape.core.errors import ConfigError


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Tunables for the recommendation gates.

    Defaults reproduce the zero-configuration behaviour exactly;
    overriding them is for experiments, not for normal callers.
    """
    heatmap_min_records: int = 5

    def __post_init__(self):
        value = self.heatmap_min_records
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(
                f"heatmap_min_records must be a non-negative integer, got {value!r}"
            )

    # -----------------------------
    # SAFE CONSTRUCTOR
    # -----------------------------
    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]]) -> "AnalyzerConfig":
        """
        Builds a config from the ``analyzer`` section of a loaded config.
        Unknown keys are rejected so typos do not pass silently.
        """
        values = values or {}

        if not isinstance(values, dict):
            raise ConfigError("analyzer section must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown analyzer option(s): {', '.join(unknown)}")

        return cls(**values)
