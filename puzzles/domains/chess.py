from __future__ import annotations
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from puzzles.domains.boards import Board, read_board

EMPTY = "."
PIECES = "KQRBNP"
Square = Tuple[int, int]

# (dr, dc) offsets
_KING = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))
_KNIGHT = ((2, -1), (2, 1), (1, -2), (-1, -2), (1, 2), (-1, 2), (-2, -1), (-2, 1))
_PAWN = ((-1, -1), (-1, 1))  # pawns capture toward row 0
_ORTHO = ((-1, 0), (0, -1), (0, 1), (1, 0))
_DIAG = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _inside(board: Board, r: int, c: int) -> bool:
    return 0 <= r < len(board) and 0 <= c < len(board[0])


def _steps(board: Board, r: int, c: int, deltas) -> List[Square]:
    """Single-step captures: the target square must hold a piece."""
    out: List[Square] = []
    for dr, dc in deltas:
        r2, c2 = r + dr, c + dc
        if _inside(board, r2, c2) and board[r2][c2] != EMPTY:
            out.append((r2, c2))
    return out


def _slides(board: Board, r: int, c: int, dirs) -> List[Square]:
    """Sliding captures: travel over empty squares, take the first piece met."""
    out: List[Square] = []
    for dr, dc in dirs:
        r2, c2 = r + dr, c + dc
        while _inside(board, r2, c2) and board[r2][c2] == EMPTY:
            r2, c2 = r2 + dr, c2 + dc
        if _inside(board, r2, c2):
            out.append((r2, c2))
    return out


CAPTURES: Dict[str, Callable[[Board, int, int], List[Square]]] = {
    "K": partial(_steps, deltas=_KING),
    "N": partial(_steps, deltas=_KNIGHT),
    "P": partial(_steps, deltas=_PAWN),
    "R": partial(_slides, dirs=_ORTHO),
    "B": partial(_slides, dirs=_DIAG),
    "Q": partial(_slides, dirs=_ORTHO + _DIAG),
}


@dataclass(frozen=True)
class ChessConfig:
    """
    Solitaire chess: every move is a capture, the capturing piece takes the
    captured piece's square. Solved when a single piece remains.
    """
    board: Board

    @property
    def dimensions(self) -> Tuple[int, int]:
        return len(self.board), len(self.board[0])

    @property
    def piece_count(self) -> int:
        return sum(1 for row in self.board for t in row if t != EMPTY)

    def piece_at(self, r: int, c: int) -> str:
        return self.board[r][c]

    def captures_from(self, r: int, c: int) -> List[Square]:
        gen = CAPTURES.get(self.board[r][c])
        return gen(self.board, r, c) if gen else []

    def is_valid_capture(self, src: Square, dst: Square) -> bool:
        r, c = src
        if not (_inside(self.board, r, c) and _inside(self.board, *dst)):
            return False
        return tuple(dst) in self.captures_from(r, c)

    def capture(self, src: Square, dst: Square) -> ChessConfig:
        """New configuration with the piece on src moved onto dst. No legality check."""
        (r1, c1), (r2, c2) = src, dst
        piece = self.board[r1][c1]
        rows = [list(row) for row in self.board]
        rows[r1][c1] = EMPTY
        rows[r2][c2] = piece
        return ChessConfig(tuple(tuple(row) for row in rows))

    # ---------- configuration contract ----------
    def is_goal(self) -> bool:
        return self.piece_count == 1

    def neighbors(self) -> List[ChessConfig]:
        out: List[ChessConfig] = []
        for r, row in enumerate(self.board):
            for c, t in enumerate(row):
                if t == EMPTY:
                    continue
                for dst in self.captures_from(r, c):
                    out.append(self.capture((r, c), dst))
        return out

    def render(self) -> str:
        return "\n".join(" ".join(row) for row in self.board)


def load_chess(path: Path | str) -> ChessConfig:
    return ChessConfig(read_board(path, alphabet=EMPTY + PIECES))
