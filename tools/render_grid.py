#!/usr/bin/env python3
# Render a generated puzzle (solution view, clues in the gutters) to PNG using Pillow.

import argparse, os
from PIL import Image, ImageDraw, ImageFont

from picturecross.difficulty import difficulty_from_name
from picturecross.engine.hints import row_clues, col_clues
from picturecross.puzzlegen.generator import generate_puzzle
from picturecross.render import palette
from picturecross.rng import resolve_seed

def render_puzzle(puzzle, out_png, cell_px=None, show_solution=True, margin=8):
    size = puzzle.size
    cell = cell_px or palette.cell_px_for(size)
    clue = max(10, cell // 2)
    rows, cols = row_clues(puzzle.grid), col_clues(puzzle.grid)
    gutter_w = max(len(c) for c in rows) * clue + clue // 2
    gutter_h = max(len(c) for c in cols) * clue + clue // 2

    w = 2 * margin + gutter_w + size * cell
    h = 2 * margin + gutter_h + size * cell
    canvas = Image.new("RGBA", (w, h), palette.BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()

    left, top = margin + gutter_w, margin + gutter_h
    for c, clue_nums in enumerate(cols):
        y = top - clue // 2
        for n in reversed(clue_nums):
            y -= clue
            draw.text((left + c * cell + cell // 3, y), str(n), fill=palette.HINT_TEXT, font=font)
    for r, clue_nums in enumerate(rows):
        x = left - clue // 2
        for n in reversed(clue_nums):
            x -= clue
            draw.text((x, top + r * cell + cell // 3), str(n), fill=palette.HINT_TEXT, font=font)

    for r in range(size):
        for c in range(size):
            x0, y0 = left + c * cell, top + r * cell
            filled = show_solution and puzzle.grid[r][c] == 1
            fill = palette.SOLUTION_FILLED if filled else palette.CELL_EMPTY
            draw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=fill, outline=palette.GRID_LINE)

    for i in range(size):
        if palette.is_thick_after(i, size):
            off = (i + 1) * cell
            draw.line((left + off, margin, left + off, top + size * cell), fill=palette.THICK_LINE, width=2)
            draw.line((margin, top + off, left + size * cell, top + off), fill=palette.THICK_LINE, width=2)

    os.makedirs(os.path.dirname(out_png) or ".", exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, default=None, help="number or any text; random if omitted")
    ap.add_argument("--size", type=int, default=10)
    ap.add_argument("--difficulty", type=str, default="MEDIUM")
    ap.add_argument("--out", type=str, default=None, help="PNG path (default out/png/<seed>.png)")
    ap.add_argument("--cell", type=int, default=None, help="Cell size in pixels")
    ap.add_argument("--blank", action="store_true", help="Draw clues only (printable puzzle)")
    args = ap.parse_args()

    try:
        diff = difficulty_from_name(args.difficulty)
    except ValueError as e:
        raise SystemExit(str(e))
    seed = resolve_seed(args.seed)
    puzzle = generate_puzzle(seed, args.size, diff)
    out = args.out or os.path.join("out", "png", f"{seed}.png")
    render_puzzle(puzzle, out, cell_px=args.cell, show_solution=not args.blank)
    print(f"Wrote {out} ({puzzle.title})")

if __name__ == "__main__":
    main()
