"""
Recursive block rendering of values.

Each kind has its own layout rule; nested values are rendered with one step
less of depth budget and assembled with the block compositor. Numeric column
layout is recovered from the formatted text by scanning for blank character
columns.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import warnings
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
import numpy as np

# Local ----------------------------------------------------------------------------------------------------------------
from .blocks import Block, EMPTY, grid, hconcat, vconcat
from .config import FormatConfig, make_config
from .kinds import Callable, Container, Kind, Numeric, Opaque, Record, Text, Value, as_value
from .summarize import AxisSplit, axis_indices

# Infix replacing elided text and elided columns
ELLIPSIS = " ... "

# Horizontal space between container columns
GUTTER = "  "

# Indentation of record field values
FIELD_INDENT = 2


# Methods --------------------------------------------------------------------------------------------------------------

def render(obj: Any, config: FormatConfig | None = None) -> Block:
    """
    Render any value into a rectangular block of text.

    Args:
        obj: A Value instance or any object accepted by as_value().
        config: Formatting options; defaults to FormatConfig().

    Returns:
        Block: The rendered value.

    Raises:
        DimensionalityError: A numeric, text or container value is not 2-D.
        SingletonError: A structured array holds more than one record.
        ConfigError: Invalid config.

    Examples:
        >>> str(render([[1, 2], [3, 4]]))
        '[ 1         2  \\n  3         4 ]'
        >>> str(render({"x": 1}))
        '.x     \\n  [ 1 ]'
    """
    return _render(obj, make_config(config), frozenset())


def shorten(text: str, strlen: int | float) -> str:
    """
    Shorten text longer than strlen to its head and tail joined by ' ... '.

    Examples:
        >>> shorten("abcdefghijklmnopqrstuvwxyz", 20)
        'abcdefg ... tuvwxyz'
    """
    n = len(text)
    if n <= strlen:
        return text
    h = (strlen - len(ELLIPSIS)) // 2
    return text[:h] + ELLIPSIS + text[n - h:]


# Private Methods ------------------------------------------------------------------------------------------------------

def _render(obj: Any, config: FormatConfig, ancestors: frozenset[int]) -> Block:
    """Render obj with the given depth budget and ids of the containers and records enclosing it."""
    value = as_value(obj)

    # Depth budget exhausted: type placeholder only
    if config.depth <= 0:
        return _placeholder(value)

    # Only an unbounded budget needs cycle detection; finite depth always terminates
    if math.isinf(config.depth) and value.kind in (Kind.CONTAINER, Kind.RECORD):
        if id(obj) in ancestors:
            warnings.warn(
                f"Self-referential {value.kind.value} rendered as placeholder",
                RuntimeWarning,
                stacklevel=2,
            )
            return _placeholder(value)
        ancestors = ancestors | {id(obj)}

    if isinstance(value, Numeric):
        return _render_numeric(value, config)
    if isinstance(value, Text):
        return Block.from_lines(["'" + shorten(value.text, config.strlen) + "'"])
    if isinstance(value, Container):
        return _render_container(value, config, ancestors)
    if isinstance(value, Record):
        return _render_record(value, config, ancestors)
    if isinstance(value, Callable):
        return Block.from_lines(["@" + shorten(value.source, config.strlen)])
    if isinstance(value, Opaque):
        return Block.from_lines([f"<{value.type_name}>"])
    raise TypeError(f"Unsupported value kind: {value.kind!r}")


def _placeholder(value: Value) -> Block:
    return _surround("<", Block.from_lines([value.kind.value]), ">", value.shape, show_size=True)


def _surround(pre: str, infix: Block, post: str, shape: tuple[int, int], show_size: bool) -> Block:
    """
    Enclose infix between pre (first row) and post (last row).

    The '@RxC' size suffix follows post when show_size is set and the shape is not 1x1.
    """
    rows, cols = shape
    size = f"@{rows}x{cols}" if show_size and rows * cols != 1 else ""
    closing = vconcat([Block.blank(max(infix.height - 1, 0), 0), Block.from_lines([post + size])])
    return hconcat([Block.from_lines([pre]), infix, closing])


def _render_numeric(value: Numeric, config: FormatConfig) -> Block:
    nrows, ncols = value.shape
    rows = axis_indices(nrows, config.threshold, config.edgeitems)
    cols = axis_indices(ncols, config.threshold, config.edgeitems)

    shown = value.data[np.ix_(rows.indices, cols.indices)]
    lines = _format_matrix(shown, config.precision)

    infix = EMPTY
    if lines:
        groups = _column_groups(lines)

        parts = [(lines, False)]
        if rows.summarized:
            head = len(rows.pre)
            parts = [(lines[:head], False), ([_marker_line(groups)], True), (lines[head:], False)]

        table = []
        for part, is_marker in parts:
            if cols.summarized:
                left, right = _split_columns(part, groups, len(cols.pre))
                divider = None if is_marker else Block.from_lines([ELLIPSIS] * len(part))
                table.append([left, divider, right])
            else:
                table.append([Block.from_lines(part)])
        infix = grid(table)

    show_size = config.show_size or rows.summarized or cols.summarized
    return _surround("[ ", infix, " ]", value.shape, show_size)


def _format_matrix(shown: np.ndarray, precision: int) -> list[str]:
    """Format entries with a shared fixed width and drop blank columns common to all rows on the left."""
    if shown.size == 0:
        return []
    if shown.dtype.kind == "b":
        shown = shown.astype(int)

    width = precision + 7 + (1 if (shown < 0).any() else 0)
    fmt = f"%{width}.{precision}g"
    lines = ["".join(fmt % v for v in row) for row in shown.tolist()]

    lead = min(len(line) - len(line.lstrip(" ")) for line in lines)
    return [line[lead:] for line in lines]


def _column_groups(lines: list[str]) -> list[int]:
    """
    Number the column groups of formatted rows.

    Returns one entry per character column: k for characters belonging to the k-th
    group (1-based), 0 for blank separator columns.
    """
    width = max(len(line) for line in lines)
    lines = [line.ljust(width) for line in lines]

    groups = [0] * width
    group = 1
    in_number = True
    for j in range(width):
        blank = all(line[j] == " " for line in lines)
        if in_number:
            if blank:
                group += 1
                in_number = False
            else:
                groups[j] = group
        elif not blank:
            in_number = True
            groups[j] = group
    return groups


def _marker_line(groups: list[int]) -> str:
    """Blank row with ':' at the rounded mean position of each column group."""
    chars = [" "] * len(groups)
    for group in range(1, max(groups, default=0) + 1):
        positions = [j for j, g in enumerate(groups) if g == group]
        if positions:
            chars[math.floor(sum(positions) / len(positions) + 0.5)] = ":"
    return "".join(chars)


def _split_columns(lines: list[str], groups: list[int], head: int) -> tuple[Block, Block]:
    """
    Split rows between column groups `head` and `head + 1`.

    The left part keeps one character after its last group, the right part one before its first.
    """
    pre_end = max(j for j, g in enumerate(groups) if g == head) + 2
    post_start = min(j for j, g in enumerate(groups) if g == head + 1) - 1
    left = Block.from_lines(line[:pre_end] for line in lines)
    right = Block.from_lines(line[post_start:] for line in lines)
    return left, right


def _render_container(value: Container, config: FormatConfig, ancestors: frozenset[int]) -> Block:
    nrows, ncols = value.shape
    rows = axis_indices(nrows, config.threshold, config.edgeitems)
    cols = axis_indices(ncols, config.threshold, config.edgeitems)

    child_config = config.descend()
    rendered = {
        (r, c): _render(value.cells[r][c], child_config, ancestors)
        for r in rows.indices
        for c in cols.indices
    }

    # Column layout: kept columns with a gutter between neighbours and
    # the ellipsis divider between head and tail columns
    layout = []
    for c in cols.indices:
        if layout:
            divider = ELLIPSIS if cols.summarized and c == cols.post[0] else GUTTER
            layout.append(divider)
        layout.append(c)

    table = []
    for r in _row_layout(rows):
        if r is None:
            table.append([_column_marker(rendered, rows, c) if isinstance(c, int) else None for c in layout])
        else:
            table.append([rendered[(r, c)] if isinstance(c, int) else Block.from_lines([c]) for c in layout])

    show_size = config.show_size or rows.summarized or cols.summarized
    return _surround("{ ", grid(table), " }", value.shape, show_size)


def _row_layout(rows: AxisSplit) -> list[int | None]:
    """Kept row indices, with None marking the elided rows."""
    if rows.summarized:
        return [*rows.pre, None, *rows.post]
    return list(rows.pre)


def _column_marker(rendered: dict[tuple[int, int], Block], rows: AxisSplit, c: int) -> Block:
    """':' centered under the widest block of a kept column."""
    width = max(rendered[(r, c)].width for r in rows.indices)
    return Block.from_lines([" " * (width // 2) + ":"])


def _render_record(value: Record, config: FormatConfig, ancestors: frozenset[int]) -> Block:
    child_config = config.descend()
    parts = []
    for name, field in value.fields:
        block = _render(field, child_config, ancestors)
        parts.append(Block.from_lines(["." + name]))
        parts.append(hconcat([Block.blank(block.height, FIELD_INDENT), block]))
    return vconcat(parts)
