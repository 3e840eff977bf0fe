#!/usr/bin/env python3
# Render a text maze (or a freshly generated one) to PNG using Pillow.

import argparse
from stickymaze.mapgen.generator import generate_maze
from stickymaze.render.image import read_maze_text, render_png
from stickymaze.render.text import render_lines

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--in", dest="infile", type=str, help="Text maze to render (as written by stickymaze -o)")
    ap.add_argument("--width", type=int, default=10, help="Width when generating")
    ap.add_argument("--height", type=int, default=10, help="Height when generating")
    ap.add_argument("--seed", type=int, default=None, help="Seed when generating")
    ap.add_argument("--map", action="store_true", help="Place start/goal when generating")
    ap.add_argument("--out", type=str, required=True, help="PNG path")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--no-labels", action="store_true", help="Plain coloured tiles")
    args = ap.parse_args()

    if args.infile:
        lines = read_maze_text(args.infile)
    else:
        lines = render_lines(generate_maze(args.width, args.height, seed=args.seed, with_map=args.map))
    render_png(lines, args.out, tile_size=args.tile, labels=not args.no_labels)
    print(f"[render_maze] Wrote {args.out} ({len(lines[0])}x{len(lines)} tiles)")

if __name__ == "__main__":
    main()
