"""
Blockdisp: recursive pretty-printer of nested values into aligned text blocks.
"""

from .blocks import Block, grid, hconcat, pad, vconcat
from .config import FormatConfig, make_config
from .display import disp, render_to_text
from .errors import BlockDispError, ClassificationError, ConfigError, DimensionalityError, SingletonError
from .kinds import Callable, Container, Kind, Numeric, Opaque, Record, Text, Value, as_value, classify, shape_of
from .render import render, shorten
from .summarize import AxisSplit, axis_indices

__all__ = [
    "AxisSplit",
    "Block",
    "BlockDispError",
    "Callable",
    "ClassificationError",
    "ConfigError",
    "Container",
    "DimensionalityError",
    "FormatConfig",
    "Kind",
    "Numeric",
    "Opaque",
    "Record",
    "SingletonError",
    "Text",
    "Value",
    "as_value",
    "axis_indices",
    "classify",
    "disp",
    "grid",
    "hconcat",
    "make_config",
    "pad",
    "render",
    "render_to_text",
    "shape_of",
    "shorten",
    "vconcat",
]
