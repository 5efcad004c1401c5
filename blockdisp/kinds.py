"""
Value kinds and classification.

Every renderable input is one of six kinds. Callers may build Value instances
explicitly, or hand plain Python and numpy objects to as_value(), which maps
them onto a kind one nesting level at a time: children of containers and
records stay raw until they are rendered.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections
import collections.abc as abc
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum, unique
from typing import Any, ClassVar, Iterable, Self

# Third-party ----------------------------------------------------------------------------------------------------------
import numpy as np

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ClassificationError, DimensionalityError, SingletonError
from .utils import callable_source, class_name, fmt_type

# numpy dtype kinds rendered as numbers: bool, signed, unsigned, float
REAL_DTYPE_KINDS = "biuf"

# Escapes keeping text on a single row
_TEXT_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t"})


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(str, Enum):
    """
    Renderable value kinds:
        - "numeric": real or boolean matrix
        - "text": single row of characters
        - "container": 2-D grid of independently typed values
        - "record": ordered named fields
        - "callable": function or other callable reference
        - "opaque": anything else, shown by type name only
    """
    NUMERIC = "numeric"
    TEXT = "text"
    CONTAINER = "container"
    RECORD = "record"
    CALLABLE = "callable"
    OPAQUE = "opaque"


class Value:
    """Base of the renderable value variants."""

    kind: ClassVar[Kind]

    @property
    def shape(self) -> tuple[int, int]:
        return 1, 1


@dataclass(frozen=True, eq=False)
class Numeric(Value):
    """
    Real or boolean matrix.

    Scalars become 1x1 and 1-D data a 1xN row; more than 2 dimensions are rejected.
    """

    data: np.ndarray
    kind: ClassVar[Kind] = Kind.NUMERIC

    def __post_init__(self) -> None:
        arr = np.asarray(self.data)
        if arr.dtype.kind not in REAL_DTYPE_KINDS:
            raise TypeError(f"Numeric data must have a real or boolean dtype, but found dtype {arr.dtype}")
        if arr.ndim > 2:
            raise DimensionalityError(f"Element with {arr.ndim} dimensions, only 2 are supported")
        if arr.ndim < 2:
            arr = arr.reshape(1, -1)
        object.__setattr__(self, "data", arr)

    @property
    def shape(self) -> tuple[int, int]:
        return self.data.shape


@dataclass(frozen=True)
class Text(Value):
    """Single row of characters; line breaks and tabs are stored escaped."""

    text: str
    kind: ClassVar[Kind] = Kind.TEXT

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Text requires a str, but found {fmt_type(self.text)}")
        object.__setattr__(self, "text", str(self.text).translate(_TEXT_ESCAPES))

    @property
    def shape(self) -> tuple[int, int]:
        return 1, len(self.text)


@dataclass(frozen=True)
class Container(Value):
    """
    2-D grid of cells, given as a sequence of equal-length rows.

    Cells may be Value instances or any objects; each is classified on its own when rendered.

    Examples:
        >>> Container([[1, "a"], [2, "b"]]).shape
        (2, 2)
        >>> Container.row([1, "a", None]).shape
        (1, 3)
    """

    cells: tuple[tuple[Any, ...], ...]
    kind: ClassVar[Kind] = Kind.CONTAINER

    def __post_init__(self) -> None:
        rows = []
        for row in self.cells:
            if isinstance(row, (str, bytes)) or not isinstance(row, abc.Sequence):
                raise TypeError(f"Container rows must be sequences, but found {fmt_type(row)}")
            rows.append(tuple(row))
        if len({len(row) for row in rows}) > 1:
            raise DimensionalityError(
                f"Container rows must have equal lengths, but found {sorted({len(r) for r in rows})}")
        object.__setattr__(self, "cells", tuple(rows))

    @classmethod
    def row(cls, items: Iterable[Any]) -> Self:
        """Container with a single row."""
        return cls((tuple(items),))

    @property
    def shape(self) -> tuple[int, int]:
        if not self.cells:
            return 0, 0
        return len(self.cells), len(self.cells[0])


@dataclass(frozen=True)
class Record(Value):
    """
    Ordered named fields; a single instance, never an array of records.

    Examples:
        >>> Record.from_mapping({"x": 1, "y": 2}).names
        ('x', 'y')
    """

    fields: tuple[tuple[str, Any], ...]
    kind: ClassVar[Kind] = Kind.RECORD

    def __post_init__(self) -> None:
        pairs = tuple((name, value) for name, value in self.fields)
        seen = set()
        for name, _ in pairs:
            if not isinstance(name, str):
                raise TypeError(f"Record field names must be str, but found {fmt_type(name)}")
            if name in seen:
                raise ValueError(f"Record field names must be unique, but {name!r} is repeated")
            seen.add(name)
        object.__setattr__(self, "fields", pairs)

    @classmethod
    def from_mapping(cls, mapping: abc.Mapping) -> Self:
        """
        Record from a mapping; keys keep their order.

        Keys are named with str(), or with repr() where str() of distinct keys collides.

        Raises:
            ClassificationError: Distinct keys that share both str() and repr().

        Examples:
            >>> Record.from_mapping({1: "a", "1": "b", "x": "c"}).names
            ('1', "'1'", 'x')
        """
        items = list(mapping.items())
        counts = collections.Counter(str(k) for k, _ in items)
        names = [str(k) if counts[str(k)] == 1 else repr(k) for k, _ in items]
        repeated = [name for name, count in collections.Counter(names).items() if count > 1]
        if repeated:
            raise ClassificationError(
                f"Cannot name record fields: distinct keys share the name {repeated[0]!r}")
        return cls(tuple((name, v) for name, (_, v) in zip(names, items)))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.fields)


@dataclass(frozen=True)
class Callable(Value):
    """Callable reference shown by its textual representation."""

    fn: Any
    kind: ClassVar[Kind] = Kind.CALLABLE

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError(f"Callable requires a callable, but found {fmt_type(self.fn)}")

    @property
    def source(self) -> str:
        return callable_source(self.fn)


@dataclass(frozen=True, eq=False)
class Opaque(Value):
    """Any other object, shown by its type name only."""

    obj: Any
    kind: ClassVar[Kind] = Kind.OPAQUE

    @property
    def type_name(self) -> str:
        return class_name(self.obj)


# Methods --------------------------------------------------------------------------------------------------------------

def as_value(obj: Any, *, strict: bool = False) -> Value:
    """
    Map an object onto its renderable Value, one nesting level deep.

    Resolution order:
        1. Value instances are returned unchanged
        2. str → Text
        3. Real or boolean scalars (Python or numpy) → 1x1 Numeric
        4. numpy structured arrays → Record (exactly one element required), and so
           are their elements (structured np.void scalars)
        5. numpy arrays → Numeric for real/bool dtypes, Container otherwise
        6. Mappings → Record, keys in insertion order
        7. Dataclass instances → Record of their fields
        8. Sequences → Numeric when all items are real scalars (1xN) or equal-length
           rows of real scalars (RxC); a 1xN Container of the items otherwise
        9. Callables → Callable
        10. Everything else → Opaque

    Args:
        obj: Any object.
        strict: Raise ClassificationError instead of falling back to Opaque.

    Raises:
        DimensionalityError: Numeric, text or container candidate with more than 2 dimensions.
        SingletonError: Structured array holding other than exactly one record.
        ClassificationError: No kind matches and strict is True.

    Examples:
        >>> as_value([1, 2, 3]).shape
        (1, 3)
        >>> as_value([1, "a"]).kind
        <Kind.CONTAINER: 'container'>
    """
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, str):
        return Text(obj)
    if _is_real_scalar(obj):
        return Numeric(np.asarray(obj))
    if isinstance(obj, np.ndarray):
        return _array_value(obj)
    if isinstance(obj, np.void) and obj.dtype.names:
        return _structured_record(obj)
    if isinstance(obj, abc.Mapping):
        return Record.from_mapping(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return Record(tuple((f.name, getattr(obj, f.name)) for f in fields(obj)))
    if isinstance(obj, abc.Sequence) and not isinstance(obj, (bytes, bytearray)):
        return _sequence_value(obj)
    if callable(obj):
        return Callable(obj)
    if strict:
        raise ClassificationError(f"Cannot classify {fmt_type(obj)} as a renderable kind")
    return Opaque(obj)


def classify(obj: Any, *, strict: bool = False) -> Kind:
    """
    Return the Kind of an object.

    Raises the same errors as as_value().

    Examples:
        >>> classify("abc")
        <Kind.TEXT: 'text'>
        >>> classify({"a": 1})
        <Kind.RECORD: 'record'>
    """
    return as_value(obj, strict=strict).kind


def shape_of(obj: Any) -> tuple[int, int]:
    """Return the (rows, columns) shape of an object's Value."""
    return as_value(obj).shape


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_real_scalar(x: Any) -> bool:
    if isinstance(x, np.generic):
        return x.dtype.kind in REAL_DTYPE_KINDS
    if isinstance(x, (bool, int, float)):
        # Ints beyond 64 bits turn into object arrays
        return np.asarray(x).dtype.kind in REAL_DTYPE_KINDS
    return False


def _array_value(arr: np.ndarray) -> Value:
    if arr.dtype.fields is not None:
        if arr.size != 1:
            raise SingletonError(f"Non-singleton elements (found {arr.size} values) not supported")
        return _structured_record(arr.reshape(-1)[0])
    if arr.dtype.kind in REAL_DTYPE_KINDS:
        return Numeric(arr)
    if arr.ndim > 2:
        raise DimensionalityError(f"Element with {arr.ndim} dimensions, only 2 are supported")
    grid = arr.reshape(1, -1) if arr.ndim < 2 else arr
    return Container(tuple(tuple(row) for row in grid))


def _sequence_value(seq: abc.Sequence) -> Value:
    items = list(seq)
    if not items:
        return Numeric(np.empty((0, 0)))

    if all(_is_real_scalar(x) for x in items):
        arr = np.asarray(items)
        if arr.dtype.kind in REAL_DTYPE_KINDS:
            return Numeric(arr)
        return Container.row(items)

    # Equal-length rows of real scalars form a matrix
    is_rows = all(isinstance(x, (list, tuple)) for x in items)
    if is_rows and len({len(x) for x in items}) == 1 and len(items[0]) > 0:
        if all(_is_real_scalar(v) for row in items for v in row):
            arr = np.asarray(items)
            if arr.dtype.kind in REAL_DTYPE_KINDS:
                return Numeric(arr)

    return Container.row(items)


def _structured_record(item: np.void) -> Record:
    return Record(tuple((name, item[name]) for name in item.dtype.names))
