"""Command line tools for generating and inspecting boards.

Usage:
    python -m maketen generate --level N [--seed S] [--challenge] [--width W --height H] [--json]
    python -m maketen sweep --from A --to B [--width W --height H]
    python -m maketen check FILE
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import get_settings
from .core.generator import generate_board
from .core.solvability import count_clearable_rectangles, find_clearable_rectangle
from .models.board import MakeTenError
from .models.schemas import DisplayBounds, GenerateRequest
from .utils.helpers import (
    board_from_json,
    extract_digit_statistics,
    format_board_for_display,
    validate_board_json,
)

logger = logging.getLogger(__name__)


def _bounds(width: Optional[float], height: Optional[float]) -> Optional[DisplayBounds]:
    if width is None and height is None:
        return None
    settings = get_settings()
    return DisplayBounds.from_screen(
        width or settings.default_screen_width,
        height or settings.default_screen_height,
        settings,
    )


def cmd_generate(args: argparse.Namespace) -> int:
    request = GenerateRequest(
        level=args.level,
        seed=args.seed,
        is_challenge=args.challenge,
        screen_width=args.width,
        screen_height=args.height,
    )
    result = generate_board(
        request.level,
        seed=request.seed,
        is_challenge=request.is_challenge,
        bounds=_bounds(request.screen_width, request.screen_height),
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    layout = result.layout
    print(f"\n{'='*60}")
    print(f"Level {result.level}{' (challenge)' if result.board.is_challenge else ''}")
    print(f"{'='*60}")
    print(f"Seed: {result.board.seed}")
    print(f"Bracket: {result.profile.bracket}, tiles: {result.tile_count}")
    print(f"Grid: {layout.rows}x{layout.cols}, tile size {layout.tile_size} ({layout.strategy.value})")
    print(f"Board: {layout.board_width}x{layout.board_height} at ({layout.board_left:.1f}, {layout.board_top:.1f})")
    print(f"Status: {result.status.value} after {result.attempts} attempt(s), {result.generation_time_ms}ms")
    for issue in result.issues:
        print(f"  ! {issue.code.value}: {issue.detail}")
    print()
    print(format_board_for_display(result.board))
    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    bounds = _bounds(args.width, args.height)
    print(f"{'level':>6} {'tiles':>6} {'grid':>7} {'tile':>5} {'strategy':>9} {'status':>22}")
    for level in range(args.start, args.end + 1):
        result = generate_board(level, bounds=bounds)
        layout = result.layout
        grid = f"{layout.rows}x{layout.cols}"
        print(
            f"{level:>6} {result.tile_count:>6} {grid:>7} {layout.tile_size:>5} "
            f"{layout.strategy.value:>9} {result.status.value:>22}"
        )
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    path = Path(args.file)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "board" in data:
        data = data["board"]
    if not isinstance(data, dict):
        print("Invalid board: expected a JSON object")
        return 1

    is_valid, error = validate_board_json(data)
    if not is_valid:
        print(f"Invalid board: {error}")
        return 1

    board = board_from_json(data)
    stats = extract_digit_statistics(board)
    print(format_board_for_display(board))
    print(f"Classes: {stats['classes']}, large adjacencies: {stats['large_adjacencies']}")

    hint = find_clearable_rectangle(board)
    if hint is None:
        print("Stuck: no rectangle sums to ten")
        return 2
    print(
        f"Solvable: {count_clearable_rectangles(board)} rectangle(s), first at "
        f"({hint.r1},{hint.c1})-({hint.r2},{hint.c2})"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maketen", description="Make-ten board engine tools")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate one board")
    gen.add_argument("--level", "-l", type=int, default=1, help="Level number")
    gen.add_argument("--seed", "-s", type=str, default=None, help="Seed label")
    gen.add_argument("--challenge", "-c", action="store_true", help="Challenge board")
    gen.add_argument("--width", type=float, default=None, help="Screen width")
    gen.add_argument("--height", type=float, default=None, help="Screen height")
    gen.add_argument("--json", action="store_true", help="Print the result as JSON")
    gen.set_defaults(func=cmd_generate)

    sweep = sub.add_parser("sweep", help="Summarise a range of levels")
    sweep.add_argument("--from", dest="start", type=int, default=1, help="First level")
    sweep.add_argument("--to", dest="end", type=int, default=60, help="Last level")
    sweep.add_argument("--width", type=float, default=None, help="Screen width")
    sweep.add_argument("--height", type=float, default=None, help="Screen height")
    sweep.set_defaults(func=cmd_sweep)

    check = sub.add_parser("check", help="Check a board JSON file for solvability")
    check.add_argument("file", help="Board JSON (a board or a generate --json result)")
    check.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (ValidationError, MakeTenError, OSError, json.JSONDecodeError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
