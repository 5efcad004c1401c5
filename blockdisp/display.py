"""
Top-level entry points: render a value to text and display it.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from typing import Any, Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .config import FormatConfig, make_config
from .render import render
from .utils import class_name

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def render_to_text(value: Any, config: FormatConfig | Mapping[str, Any] | None = None, **options: Any) -> str:
    """
    Render a value as a multi-line text block.

    Nested containers and records are shown recursively, long axes are summarized
    with '...' and ':' markers, and long text is shortened in the middle. Every line
    of the result has the same width.

    Args:
        value: A Value instance or any object accepted by blockdisp.as_value().
        config: Base options as a FormatConfig or a mapping of option names.
        **options: threshold, edgeitems, precision, strlen, depth, show_size.

    Returns:
        str: Lines of the rendered block joined by newlines.

    Raises:
        ConfigError: Unknown option name or invalid option value.
        DimensionalityError: A numeric, text or container value is not 2-D.
        SingletonError: A structured array holds more than one record.

    Examples:
        >>> render_to_text(list(range(1, 21)))
        '[ 1         2         3  ...  18        19        20 ]@1x20'
        >>> render_to_text("abcdefghijklmnopqrstuvwxyz")
        "'abcdefg ... tuvwxyz'"
        >>> render_to_text(["a", "b", "c", "d"], edgeitems=1, threshold=2)
        "{ 'a' ... 'd' }@1x4"
    """
    cfg = make_config(config, **options)
    block = render(value, cfg)
    logger.debug("Rendered %s into a %dx%d block", class_name(value), block.height, block.width)
    return str(block)


def disp(value: Any, config: FormatConfig | Mapping[str, Any] | None = None, **options: Any) -> None:
    """
    Print the rendering of a value to standard output.

    Accepts the same arguments as render_to_text().

    Examples:
        >>> disp([1, 2, 3])
        [ 1         2         3 ]
    """
    print(render_to_text(value, config, **options))
