#!/usr/bin/env python3
"""Solve a chess or hoppers board and save one PNG per step; these frames stand in for a graphical front end."""
import argparse, os, sys
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import List

from puzzles.domains.boards import Board, PuzzleFileError
from puzzles.domains.chess import load_chess
from puzzles.domains.hoppers import INVALID, load_hoppers
from puzzles.search.bfs import solve

LOADERS = {"chess": load_chess, "hoppers": load_hoppers}
COLORS = {"R": "tab:red", "G": "tab:green"}

def draw_board(board: Board, out_path: Path, title: str = ""):
    R, C = len(board), len(board[0])
    plt.figure(figsize=(max(2, C), max(2, R)))
    ax = plt.gca()
    ax.set_xlim(0, C); ax.set_ylim(0, R)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(R + 1):
        ax.plot([0, C], [i, i], color="black", linewidth=1)
    for j in range(C + 1):
        ax.plot([j, j], [0, R], color="black", linewidth=1)
    for r, row in enumerate(board):
        for c, t in enumerate(row):
            if t == INVALID:
                ax.add_patch(plt.Rectangle((c, r), 1, 1, color="lightgray"))
            elif t != ".":
                ax.text(c + 0.5, r + 0.55, t, ha="center", va="center",
                        fontsize=16, color=COLORS.get(t, "black"))
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_path(path, outdir: Path) -> List[Path]:
    frames = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(s.board, p, title=f"Step {i}")
        frames.append(p)
    return frames

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one board puzzle and save board images along the path.")
    p.add_argument("domain", choices=sorted(LOADERS))
    p.add_argument("filename")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    try:
        start = LOADERS[args.domain](args.filename)
    except (OSError, PuzzleFileError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return 1

    res = solve(start)
    if not res.solved:
        print("No solution.")
        return 0

    outdir = Path(args.outdir)
    save_path(res.path, outdir)
    print(f"Saved {len(res.path)} frames to {outdir}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
