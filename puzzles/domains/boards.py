from __future__ import annotations
from pathlib import Path
from typing import Iterable, Tuple

Board = Tuple[Tuple[str, ...], ...]


class PuzzleFileError(ValueError):
    """Malformed puzzle file."""


def parse_board(lines: Iterable[str], source: str = "<board>",
                alphabet: str | None = None) -> Board:
    """
    Parse the board text format:
        rows cols
        t t t ...      (rows lines of cols single-character tokens)
    Trailing blank lines are ignored. `alphabet` restricts the tokens.
    """
    rows_in = [ln.rstrip("\n") for ln in lines]
    while rows_in and not rows_in[-1].strip():
        rows_in.pop()
    if not rows_in:
        raise PuzzleFileError(f"{source}: empty file")

    head = rows_in[0].split()
    if len(head) != 2:
        raise PuzzleFileError(f"{source}:1: expected 'rows cols', got {rows_in[0]!r}")
    try:
        R, C = int(head[0]), int(head[1])
    except ValueError:
        raise PuzzleFileError(f"{source}:1: dimensions must be integers, got {rows_in[0]!r}") from None
    if R < 1 or C < 1:
        raise PuzzleFileError(f"{source}:1: dimensions must be positive")
    if len(rows_in) - 1 != R:
        raise PuzzleFileError(f"{source}: expected {R} board rows, found {len(rows_in) - 1}")

    board = []
    for lineno, line in enumerate(rows_in[1:], start=2):
        cells = tuple(line.split())
        if len(cells) != C:
            raise PuzzleFileError(f"{source}:{lineno}: expected {C} cells, found {len(cells)}")
        for t in cells:
            if len(t) != 1 or (alphabet is not None and t not in alphabet):
                raise PuzzleFileError(f"{source}:{lineno}: bad cell {t!r}")
        board.append(cells)
    return tuple(board)


def read_board(path: Path | str, alphabet: str | None = None) -> Board:
    path = Path(path)
    with path.open() as f:
        return parse_board(f, source=str(path), alphabet=alphabet)


def format_board(board: Board) -> str:
    lines = [f"{len(board)} {len(board[0]) if board else 0}"]
    lines += [" ".join(row) for row in board]
    return "\n".join(lines) + "\n"


def write_board(path: Path | str, board: Board) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_board(board))
    return path
