class VizShapeError(Exception):
    """Base class for all vizshape errors."""


class InvalidInputError(VizShapeError, TypeError):
    """
    Raised when a collection is neither a sequence of records nor a
    wrapper object carrying one (e.g. ``{"results": [...]}``).

    Messy records are never an error; only the container is validated.
    """


class ConfigError(VizShapeError, ValueError):
    """Raised for analyzer configuration values outside their valid range."""
