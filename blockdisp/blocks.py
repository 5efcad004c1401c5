"""
Rectangular character blocks and their composition.

A Block is an immutable grid of characters. Blocks are combined by padded
horizontal and vertical concatenation; composition only ever adds spaces,
it never drops or reorders characters.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Iterable, Self, Sequence


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """
    Immutable rectangle of characters.

    Attributes:
        lines: Rows of the block, each exactly `width` characters long.
        width: Number of character columns. Kept explicitly so that blocks
            without rows still carry a width.

    Examples:
        >>> b = Block.from_lines(["ab", "c"])
        >>> b.lines, b.height, b.width
        (('ab', 'c '), 2, 2)
    """

    lines: tuple[str, ...] = ()
    width: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.lines, tuple):
            raise TypeError(f"lines must be a tuple of str, but found {type(self.lines).__name__}")
        for line in self.lines:
            if len(line) != self.width:
                raise ValueError(f"all lines must have width {self.width}, but found {line!r}")
            if "\n" in line:
                raise ValueError(f"lines must not contain line breaks, but found {line!r}")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Self:
        """Build a block from rows of text, padding shorter rows on the right."""
        lines = list(lines)
        width = max((len(line) for line in lines), default=0)
        return cls(tuple(line.ljust(width) for line in lines), width)

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Build a block from newline-separated text."""
        return cls.from_lines(text.split("\n")) if text else cls()

    @classmethod
    def blank(cls, height: int, width: int) -> Self:
        """Block of spaces with the given size."""
        return cls(tuple(" " * width for _ in range(height)), width)

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    @property
    def is_empty(self) -> bool:
        return self.height == 0

    def __str__(self) -> str:
        return "\n".join(self.lines)


EMPTY = Block()


# Methods --------------------------------------------------------------------------------------------------------------

def pad(block: Block, height: int, width: int) -> Block:
    """
    Pad a block with spaces on the right and at the bottom.

    Targets smaller than the block keep the block's own size; content is never truncated.
    """
    height = max(height, block.height)
    width = max(width, block.width)
    if (height, width) == block.shape:
        return block
    lines = [line.ljust(width) for line in block.lines]
    lines.extend(" " * width for _ in range(height - block.height))
    return Block(tuple(lines), width)


def hconcat(blocks: Sequence[Block], gutter: str = "") -> Block:
    """
    Place blocks side by side, top aligned.

    Every block is padded at the bottom to the tallest height; the gutter string
    is inserted between neighbours on every row.
    """
    if not blocks:
        return EMPTY
    height = max(b.height for b in blocks)
    padded = [pad(b, height, b.width) for b in blocks]
    lines = tuple(gutter.join(row) for row in zip(*(b.lines for b in padded)))
    width = sum(b.width for b in blocks) + len(gutter) * (len(blocks) - 1)
    return Block(lines, width)


def vconcat(blocks: Sequence[Block]) -> Block:
    """Stack blocks top to bottom, padding every row on the right to the widest width."""
    if not blocks:
        return EMPTY
    width = max(b.width for b in blocks)
    lines = []
    for b in blocks:
        lines.extend(pad(b, b.height, width).lines)
    return Block(tuple(lines), width)


def grid(cells: Sequence[Sequence[Block | None]]) -> Block:
    """
    Lay out a table of blocks.

    Each table column is as wide as its widest block and each table row as high as its
    tallest block; blocks are top-left aligned in their slot. Rows holding only empty
    blocks are dropped. None stands for an empty block; short rows are completed with
    empty blocks.

    Examples:
        >>> grid([[Block.from_text("a"), Block.from_text("bb")],
        ...       [Block.from_text("ccc"), None]]).lines
        ('a  bb', 'ccc  ')
    """
    rows = [[EMPTY if b is None else b for b in row] for row in cells]
    if not rows:
        return EMPTY
    ncols = max(len(row) for row in rows)
    for row in rows:
        row.extend(EMPTY for _ in range(ncols - len(row)))

    widths = [max(row[c].width for row in rows) for c in range(ncols)]
    stacked = []
    for row in rows:
        height = max((b.height for b in row), default=0)
        if height == 0:
            continue
        stacked.append(hconcat([pad(b, height, w) for b, w in zip(row, widths)]))
    if not stacked:
        return Block.blank(0, sum(widths))
    return vconcat(stacked)
