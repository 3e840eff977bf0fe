# src/stickymaze/render/image.py
# Render a character maze to PNG using Pillow.

import os
from typing import List

from PIL import Image, ImageDraw, ImageFont

from .palette import color_for, text_color_for

def read_maze_text(path: str) -> List[str]:
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if line:
                rows.append(line)
    return rows

def tile_image(ch: str, tile_size: int, labels: bool = True) -> Image.Image:
    img = Image.new("RGBA", (tile_size, tile_size), color=color_for(ch))
    if labels and tile_size >= 8:
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()
        tw = draw.textlength(ch, font=font)
        th = 8
        draw.text(((tile_size - tw) / 2, (tile_size - th) / 2), ch, fill=text_color_for(ch), font=font)
    return img

def render_png(lines: List[str], out_png: str, tile_size: int = 16, margin: int = 0, labels: bool = True) -> None:
    if not lines:
        raise ValueError("empty maze")
    cols = len(lines[0])
    if any(len(row) != cols for row in lines):
        raise ValueError(f"expected {len(lines)} rows of {cols} columns")

    w, h = cols * tile_size + 2 * margin, len(lines) * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    cache = {}
    for y, row in enumerate(lines):
        for x, ch in enumerate(row):
            if ch not in cache:
                cache[ch] = tile_image(ch, tile_size, labels)
            img = cache[ch]
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)
