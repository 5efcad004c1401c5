"""
Blockdisp utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import ast
import functools
import inspect
import textwrap
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(int)
        'int'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    return cls.__name__


def callable_source(fn: Any) -> str:
    """
    Return a short textual representation of a callable.

    Named functions, builtins, methods and classes are shown by their qualified name,
    partials by the wrapped callable. Lambdas are shown by their source text, like
    'lambda x: 2 * x'. When that text cannot be recovered unambiguously (no source file,
    a lambda split over several lines, or several lambdas on one line) the lambda is
    shown by its call signature instead, like 'lambda(x)'.

    Examples:
        >>> callable_source(abs)
        'abs'
        >>> callable_source(functools.partial(max, 0))
        'partial(max)'
    """
    if isinstance(fn, functools.partial):
        return f"partial({callable_source(fn.func)})"

    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if not isinstance(name, str):
        return _safe_repr(fn)

    if name.endswith("<lambda>"):
        source = _lambda_source(fn)
        if source is not None:
            return source
        try:
            signature = str(inspect.signature(fn))
        except (TypeError, ValueError):
            signature = "(...)"
        return "lambda" + signature

    return name


def fmt_type(obj: Any) -> str:
    """Format type of obj for error messages, like '<int>'."""
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any, max_repr: int = 80) -> str:
    """Format obj as a type-value pair for error messages, like '<int: 42>'."""
    repr_ = _safe_repr(obj)
    if len(repr_) > max_repr:
        repr_ = repr_[:max_repr] + "..."
    return f"<{class_name(obj)}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _safe_repr(obj: Any) -> str:
    """
    repr() that falls back to a placeholder when __repr__ raises.
    """
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"


def _lambda_source(fn: Any) -> str | None:
    """Source text of a lambda expression, or None if it is unavailable or ambiguous."""
    try:
        source = textwrap.dedent(inspect.getsource(fn))
        tree = ast.parse(source)
    except (OSError, TypeError, SyntaxError, ValueError):
        return None
    lambdas = [node for node in ast.walk(tree) if isinstance(node, ast.Lambda)]
    if len(lambdas) != 1:
        return None
    return ast.get_source_segment(source, lambdas[0])
