"""
Blockdisp error types.

All errors are raised at the point of detection and propagate unmodified;
a render either fully succeeds or fails as a whole.
"""


# Classes --------------------------------------------------------------------------------------------------------------

class BlockDispError(Exception):
    """Base class for all blockdisp errors."""


class DimensionalityError(BlockDispError, ValueError):
    """A numeric, text or container value does not have exactly 2 dimensions."""


class SingletonError(BlockDispError, ValueError):
    """A record candidate holds more than one element."""


class ConfigError(BlockDispError, ValueError):
    """Unknown configuration option, or an option of wrong type or out of range."""


class ClassificationError(BlockDispError, TypeError):
    """A value matches no known kind (raised only by strict classification)."""
