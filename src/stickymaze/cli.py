# src/stickymaze/cli.py
# `stickymaze` console entry point.

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_SIZE, VERSION, MazeConfig
from .mapgen.generator import generate_maze
from .render.text import render_text, save_to_file

log = logging.getLogger(__name__)

def parse_dimension(raw: Optional[str], default: int = DEFAULT_SIZE) -> int:
    """Non-negative int from the command line; anything else means `default`."""
    if raw is None:
        return default
    # Plain ASCII digits with an optional "+", as an unsigned machine int.
    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits.isascii() and digits.isdigit()):
        return default
    value = int(digits)
    return value if value <= sys.maxsize else default

def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --height, so help is long-form only.
    p = argparse.ArgumentParser(
        prog="stickymaze",
        description="Generates a maze with Kruskal's algorithm, assigns stickiness "
                    "to each cell, and can mark a start and goal",
        add_help=False,
    )
    p.add_argument("--help", action="help", help="Show this message and exit")
    p.add_argument("-w", "--width", help=f"Sets the width of the maze (default {DEFAULT_SIZE})")
    p.add_argument("-h", "--height", help=f"Sets the height of the maze (default {DEFAULT_SIZE})")
    p.add_argument("-o", "--output", help="Output file name (optional, prints to console if not provided)")
    p.add_argument("-m", "--map", action="store_true", help="Include a start (S) and goal (G) in the maze")
    p.add_argument("--seed", type=int, help="Seed the generator for a reproducible maze")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return p

def config_from_args(args: argparse.Namespace) -> MazeConfig:
    return MazeConfig(
        width=parse_dimension(args.width),
        height=parse_dimension(args.height),
        output=args.output,
        with_map=args.map,
        seed=args.seed,
    )

def run(cfg: MazeConfig) -> int:
    maze = generate_maze(cfg.width, cfg.height, seed=cfg.seed, with_map=cfg.with_map)
    if cfg.output is None:
        sys.stdout.write(render_text(maze))
        return 0
    try:
        save_to_file(maze, cfg.output)
    except OSError as e:
        print(f"Error saving to file: {e}", file=sys.stderr)
        return 1
    log.debug("wrote %dx%d maze to %s", cfg.width, cfg.height, cfg.output)
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[stickymaze] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    return run(config_from_args(args))

if __name__ == "__main__":
    sys.exit(main())
