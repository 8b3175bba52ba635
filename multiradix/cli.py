"""Command-line interface for multiradix."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from itertools import islice
from pathlib import Path
from time import perf_counter
from typing import Any, Iterable, Iterator, List, Optional, TextIO

from multiradix.config import ENUMERATION_CONFIG
from multiradix.expansion import expand_grid, grid_size, load_grid_yaml
from multiradix.expansion.brackets import parse_pool_expr
from multiradix.logging import get_logger, set_global_log_level
from multiradix.product import product_size
from multiradix.reference import METHODS, get_method

logger = get_logger(__name__)


def _parse_pools(exprs: List[str]) -> List[List[str]]:
    """Turn CLI pool arguments like ``"a,b"`` or ``"1-3"`` into pools."""
    return [parse_pool_expr(expr) for expr in exprs]


def _format_combo(combo: Iterable[Any], as_json: bool) -> str:
    items = list(combo)
    if as_json:
        return json.dumps(items)
    return " ".join(str(item) for item in items)


def _write_lines(lines: Iterator[str], out: TextIO) -> int:
    count = 0
    for line in lines:
        out.write(line + "\n")
        count += 1
    return count


def _fail(action: str, exc: BaseException) -> None:
    logger.error(f"Failed to {action}: {type(exc).__name__}: {exc}")
    print(f"ERROR: Failed to {action}: {exc}", file=sys.stderr)
    sys.exit(1)


def _run_product(
    exprs: List[str],
    repeat: int,
    method: str,
    limit: Optional[int],
    as_json: bool,
) -> None:
    """Print the product of the given pools, one tuple per line."""
    try:
        pools = _parse_pools(exprs)
        combos = get_method(method)(pools, repeat=repeat)
    except (TypeError, ValueError) as e:
        _fail("enumerate product", e)
        return

    _start = perf_counter()
    lines = (_format_combo(c, as_json) for c in islice(combos, limit))
    written = _write_lines(lines, sys.stdout)
    logger.debug(
        f"Wrote {written} combinations via '{method}' in "
        f"{(perf_counter() - _start) * 1000.0:.1f} ms"
    )


def _run_count(exprs: List[str], repeat: int) -> None:
    """Print the number of combinations without enumerating them."""
    try:
        print(product_size(_parse_pools(exprs), repeat))
    except (TypeError, ValueError) as e:
        _fail("count product", e)


def _run_grid(path: Path, limit: Optional[int], output: Optional[Path]) -> None:
    """Print one JSON object per grid point, or write them to ``output``."""
    logger.info(f"Loading grid from: {path}")
    try:
        spec = load_grid_yaml(path.read_text())
        size = grid_size(spec)
        # --limit caps the output, so the size check applies to it instead
        max_expansions = None
        if limit is not None and limit <= ENUMERATION_CONFIG.max_expansions:
            max_expansions = size
        points = expand_grid(spec, max_expansions=max_expansions)
    except FileNotFoundError:
        logger.error(f"Grid file not found: {path}")
        print(f"ERROR: Grid file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except (OSError, TypeError, ValueError) as e:
        _fail("expand grid", e)
        return

    logger.info(f"Grid has {size} points ({spec.mode})")
    lines = (json.dumps(p, default=str) for p in islice(points, limit))
    if output is None:
        _write_lines(lines, sys.stdout)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open("w", encoding="utf-8") as fh:
            written = _write_lines(lines, fh)
    except OSError as e:
        _fail("write grid", e)
        return
    logger.info(f"Wrote {written} grid points to: {output}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``multiradix`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="multiradix",
        description="Enumerate Cartesian products and parameter grids.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{product,count,grid}",
        help="Available commands",
    )

    product_parser = subparsers.add_parser(
        "product", help="Print every combination of the given pools"
    )
    count_parser = subparsers.add_parser(
        "count", help="Print the number of combinations of the given pools"
    )
    for p in (product_parser, count_parser):
        p.add_argument(
            "pools",
            nargs="+",
            metavar="POOL",
            help="Pool as a bracket expression body, e.g. 'a,b,c' or '1-3'",
        )
        p.add_argument(
            "--repeat",
            "-r",
            type=int,
            default=1,
            help="Repeat the whole pool list this many times (default: 1)",
        )
    product_parser.add_argument(
        "--method",
        "-m",
        choices=sorted(METHODS),
        default="index",
        help="Product construction to use (default: index)",
    )
    product_parser.add_argument(
        "--json", action="store_true", help="Print each combination as a JSON array"
    )

    grid_parser = subparsers.add_parser(
        "grid", help="Expand a YAML parameter grid into JSON lines"
    )
    grid_parser.add_argument("grid_file", type=Path, help="Path to grid YAML")
    grid_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write JSON lines to this file instead of stdout",
    )

    for p in (product_parser, grid_parser):
        p.add_argument(
            "--limit",
            "-n",
            type=int,
            default=None,
            help="Stop after this many lines",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)
    if getattr(args, "limit", None) is not None and args.limit < 0:
        parser.error("--limit must be >= 0")

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "product":
        _run_product(args.pools, args.repeat, args.method, args.limit, args.json)
    elif args.command == "count":
        _run_count(args.pools, args.repeat)
    elif args.command == "grid":
        _run_grid(args.grid_file, args.limit, args.output)


if __name__ == "__main__":
    main()
