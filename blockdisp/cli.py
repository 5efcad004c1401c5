"""
Blockdisp command line: display JSON or TOML documents as text blocks.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Any, Sequence

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .config import FormatConfig, make_config
from .display import disp
from .errors import BlockDispError, ConfigError

logger = logging.getLogger(__name__)

STDIN = "-"


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    defaults = FormatConfig()
    parser = argparse.ArgumentParser(
        prog="blockdisp",
        description="Display JSON or TOML documents as aligned text blocks.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="JSON or TOML (by .toml suffix) files; '-' or nothing reads JSON from stdin.",
    )
    parser.add_argument(
        "--threshold",
        type=int_or_inf,
        default=defaults.threshold,
        help="Axis length above which arrays are summarized, or 'inf'.",
    )
    parser.add_argument(
        "--edgeitems",
        type=int,
        default=defaults.edgeitems,
        help="Items shown at each edge of a summarized axis.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=defaults.precision,
        help="Significant digits of numbers.",
    )
    parser.add_argument(
        "--strlen",
        type=int_or_inf,
        default=defaults.strlen,
        help="Maximum text length before shortening, or 'inf'.",
    )
    parser.add_argument(
        "--depth",
        type=int_or_inf,
        default=defaults.depth,
        help="Maximum nesting depth shown, or 'inf'.",
    )
    parser.add_argument(
        "--show-size",
        action="store_true",
        help="Always show the size suffix of matrices and containers.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def int_or_inf(text: str) -> int | float:
    """
    Parse an integer option value that may also be 'inf'.

    Examples:
        >>> int_or_inf("12")
        12
        >>> int_or_inf("Inf")
        inf
    """
    if text.strip().lower() in ("inf", "infinity"):
        return math.inf
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer or 'inf', but got {text!r}") from None


def load_source(source: str) -> Any:
    """
    Load a document from a file path, or JSON from stdin for '-'.

    Files with a .toml suffix are parsed as TOML, everything else as JSON.
    Mapping key order is preserved.

    Raises:
        OSError: The file cannot be read.
        ValueError: The document cannot be parsed.
    """
    if source == STDIN:
        logger.debug("Loading JSON from stdin")
        return json.load(sys.stdin)

    path = Path(source)
    if path.suffix.lower() == ".toml":
        logger.debug("Loading TOML from %s", path)
        return toml.load(path)
    logger.debug("Loading JSON from %s", path)
    return json.loads(path.read_text(encoding="utf-8"))


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line; returns the process exit status.

    Exit status is 0 on success, 1 when a document cannot be loaded or displayed,
    2 for invalid options.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = make_config(
            threshold=args.threshold,
            edgeitems=args.edgeitems,
            precision=args.precision,
            strlen=args.strlen,
            depth=args.depth,
            show_size=args.show_size,
        )
    except ConfigError as e:
        parser.error(str(e))

    sources = args.files or [STDIN]
    for source in sources:
        try:
            document = load_source(source)
        except (OSError, ValueError) as e:
            print(f"blockdisp: {source}: {e}", file=sys.stderr)
            return 1

        if len(sources) > 1:
            print(f"{source}:")
        try:
            disp(document, config)
        except BlockDispError as e:
            print(f"blockdisp: {source}: {e}", file=sys.stderr)
            return 1
    return 0
