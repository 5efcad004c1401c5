"""
Axis summarization shared by the matrix and container renderers.

A long axis is summarized by keeping `edgeitems` indices at each edge and
eliding everything in between.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import itertools
from dataclasses import dataclass
from typing import Iterator


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class AxisSplit:
    """Indices shown along one axis.

    Attributes:
        pre: Indices shown from the start of the axis.
        post: Indices shown from the end of the axis; empty when not summarized.
    """

    pre: range
    post: range

    def __iter__(self) -> Iterator[range]:
        yield self.pre
        yield self.post

    @property
    def summarized(self) -> bool:
        """Whether interior indices are elided."""
        return len(self.post) > 0

    @property
    def indices(self) -> list[int]:
        """All shown indices in order."""
        return list(itertools.chain(self.pre, self.post))


# Methods --------------------------------------------------------------------------------------------------------------

def axis_indices(n: int, threshold: int | float, edgeitems: int) -> AxisSplit:
    """
    Decide which indices along an axis of length n are shown.

    The axis is summarized iff n > max(threshold, 2 * edgeitems); then the first and
    last `edgeitems` indices are kept. Otherwise all indices are kept in `pre`.

    Args:
        n: Axis length.
        threshold: Length above which summarization may trigger; math.inf disables it.
        edgeitems: Items kept at each edge when summarizing.

    Returns:
        AxisSplit: Unpacks as (pre, post).

    Raises:
        ValueError: If n is negative or edgeitems < 1.

    Examples:
        >>> axis_indices(20, 5, 3)
        AxisSplit(pre=range(0, 3), post=range(17, 20))
        >>> axis_indices(6, 5, 3)
        AxisSplit(pre=range(0, 6), post=range(0, 0))
    """
    if n < 0:
        raise ValueError(f"axis length must be >= 0, but got {n}")
    if edgeitems < 1:
        raise ValueError(f"edgeitems must be >= 1, but got {edgeitems}")

    # max() keeps math.inf intact
    if n > max(threshold, 2 * edgeitems):
        return AxisSplit(pre=range(0, edgeitems), post=range(n - edgeitems, n))
    return AxisSplit(pre=range(0, n), post=range(0))
