"""
Formatting configuration for block rendering.

FormatConfig is immutable and passed through every recursive render call;
nested levels receive a copy with the depth budget decremented.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import numbers
from dataclasses import dataclass, fields, replace as dataclasses_replace
from typing import Any, Mapping, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ConfigError
from .utils import fmt_type, fmt_value

# Option names accepted in camelCase form
OPTION_ALIASES = {
    "showSize": "show_size",
}


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatConfig:
    """
    Options controlling how values are rendered.

    Attributes:
        threshold: Axis length above which summarization activates. May be math.inf
            to disable summarization.
        edgeitems: Items kept at each edge of a summarized axis.
        precision: Significant digits used for numeric values.
        strlen: Maximum text length before it is shortened with a middle ' ... '.
            May be math.inf.
        depth: Remaining recursion budget; nested values at depth 0 are shown as
            '<kind>' placeholders. May be math.inf.
        show_size: Always append the '@RxC' size suffix to non-scalar matrices and
            containers, not only to summarized ones.

    Examples:
        >>> FormatConfig().merge(edgeitems=2).edgeitems
        2
        >>> FormatConfig(depth=1).descend().depth
        0
    """

    threshold: int | float = 5
    edgeitems: int = 3
    precision: int = 3
    strlen: int | float = 20
    depth: int | float = 6
    show_size: bool = False

    def __post_init__(self) -> None:
        """Validate option types and ranges."""
        _check_int_or_inf("threshold", self.threshold, minimum=0)
        _check_int("edgeitems", self.edgeitems, minimum=1)
        _check_int("precision", self.precision, minimum=1)
        _check_int_or_inf("strlen", self.strlen, minimum=5)
        _check_int_or_inf("depth", self.depth, minimum=0)
        if not isinstance(self.show_size, bool):
            raise ConfigError(f"show_size must be a bool, but got {fmt_type(self.show_size)}")

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        """Names of all accepted options."""
        return tuple(f.name for f in fields(cls))

    def merge(self, **options: Any) -> Self:
        """
        Return a copy with the given options replaced.

        Raises:
            ConfigError: If an option name is unknown or a value is invalid.
        """
        if not options:
            return self
        return dataclasses_replace(self, **_normalize_names(options))

    def descend(self) -> Self:
        """Return the configuration for the next nesting level, one depth step lower."""
        return dataclasses_replace(self, depth=self.depth - 1)


# Methods --------------------------------------------------------------------------------------------------------------

def make_config(config: FormatConfig | Mapping[str, Any] | None = None, **options: Any) -> FormatConfig:
    """
    Build the effective configuration from an optional base and keyword options.

    Args:
        config: A FormatConfig, a mapping of option names to values, or None for defaults.
        **options: Options overriding the base configuration.

    Returns:
        FormatConfig: The merged configuration.

    Raises:
        ConfigError: Unknown option names, invalid values, or an unsupported config type.

    Examples:
        >>> make_config(threshold=math.inf).threshold
        inf
        >>> make_config({"showSize": True}).show_size
        True
    """
    if config is None:
        base = FormatConfig()
    elif isinstance(config, FormatConfig):
        base = config
    elif isinstance(config, Mapping):
        base = FormatConfig().merge(**dict(config))
    else:
        raise ConfigError(f"config must be a FormatConfig, a mapping or None, but found {fmt_type(config)}")
    return base.merge(**options)


# Private Methods ------------------------------------------------------------------------------------------------------

def _normalize_names(options: Mapping[str, Any]) -> dict[str, Any]:
    """Resolve option aliases and reject unknown names."""
    valid = FormatConfig.option_names()
    normalized = {}
    for name, value in options.items():
        name = OPTION_ALIASES.get(name, name)
        if name not in valid:
            raise ConfigError(f"Unknown option {name!r}. Expected one of: {', '.join(valid)}")
        normalized[name] = value
    return normalized


def _check_int(name: str, value: Any, *, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigError(f"{name} must be an int, but got {fmt_type(value)}")
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, but got {fmt_value(value)}")


def _check_int_or_inf(name: str, value: Any, *, minimum: int) -> None:
    if isinstance(value, float) and value == math.inf:
        return
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigError(f"{name} must be an int or math.inf, but got {fmt_type(value)}")
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, but got {fmt_value(value)}")
