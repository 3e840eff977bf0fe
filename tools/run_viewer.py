#!/usr/bin/env python3
# Minimal interactive viewer for generated mazes.
# - R: new maze (next seed)
# - M: toggle start/goal markers
# - Arrows: grow/shrink width (left/right) and height (up/down)
# - Esc: quit

import argparse
import pygame
from stickymaze.mapgen.generator import generate_maze
from stickymaze.render.text import render_lines
from stickymaze.render.tileset import Tileset

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=10, help="Maze width")
    ap.add_argument("--height", type=int, default=10, help="Maze height")
    ap.add_argument("--seed", type=int, default=1, help="First seed; R steps to the next")
    ap.add_argument("--tile", type=int, default=24, help="Tile size in pixels")
    ap.add_argument("--map", action="store_true", help="Start with start/goal markers")
    args = ap.parse_args()

    pygame.init()
    clock = pygame.time.Clock()
    tiles = Tileset(args.tile)

    width, height, seed, with_map = args.width, args.height, args.seed, args.map

    def load_lines():
        return render_lines(generate_maze(width, height, seed=seed, with_map=with_map))

    def resize(lines):
        return pygame.display.set_mode((len(lines[0]) * args.tile, len(lines) * args.tile))

    lines = load_lines()
    screen = resize(lines)
    running = True
    while running:
        dirty = False
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    seed += 1; dirty = True
                elif ev.key == pygame.K_m:
                    with_map = not with_map; dirty = True
                elif ev.key == pygame.K_RIGHT:
                    width += 1; dirty = True
                elif ev.key == pygame.K_LEFT:
                    width = max(1, width - 1); dirty = True
                elif ev.key == pygame.K_DOWN:
                    height += 1; dirty = True
                elif ev.key == pygame.K_UP:
                    height = max(1, height - 1); dirty = True
        if dirty:
            lines = load_lines()
            screen = resize(lines)

        screen.fill((0, 0, 0))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                screen.blit(tiles.view(ch, args.tile), (x * args.tile, y * args.tile))

        pygame.display.set_caption(
            f"stickymaze viewer | {width}x{height}  seed {seed}  map:{with_map}"
        )
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()

if __name__ == "__main__":
    main()
