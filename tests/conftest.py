#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import json
import pathlib
from typing import Any, Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def nested_cells() -> Callable[[int, Any], list]:
    """Fixture returning a factory of single-cell lists nested `levels` deep around a leaf."""

    def _nest(levels: int, leaf: Any = "hello") -> list:
        value = [leaf]
        for _ in range(levels - 1):
            value = [value]
        return value

    return _nest


@pytest.fixture
def json_file(tmp_path: pathlib.Path) -> Callable[[Any, str], pathlib.Path]:
    """Fixture to write a JSON document to a temporary file."""

    def _write(document: Any, name: str = "data.json") -> pathlib.Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
