from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from puzzles.domains.boards import Board, read_board

EMPTY = "."
INVALID = "*"
RED_FROG = "R"
GREEN_FROG = "G"
FROGS = RED_FROG + GREEN_FROG

Square = Tuple[int, int]

# (dr, dc) from the jumping frog to the frog it jumps over; the landing cell is twice as far.
_CARDINAL = ((-2, 0), (0, 2), (2, 0), (0, -2))
_DIAGONAL = ((-1, -1), (-1, 1), (1, 1), (1, -1))
JUMPS = _CARDINAL + _DIAGONAL


@dataclass(frozen=True)
class HoppersConfig:
    """
    Hoppers: a frog jumps over a green frog into an empty cell and the green
    frog leaves the board. Red frogs jump but are never jumped.
    Solved when no green frog is left.
    """
    board: Board

    @property
    def dimensions(self) -> Tuple[int, int]:
        return len(self.board), len(self.board[0])

    def _inside(self, r: int, c: int) -> bool:
        R, C = self.dimensions
        return 0 <= r < R and 0 <= c < C

    def cell(self, r: int, c: int) -> str:
        return self.board[r][c]

    def jump_error(self, src: Square, dst: Square) -> Optional[str]:
        """Why src -> dst is not a legal jump, or None when it is."""
        (r1, c1), (r2, c2) = src, dst
        if not (self._inside(r1, c1) and self._inside(r2, c2)):
            return "Off the board"
        if self.board[r1][c1] not in FROGS:
            return "Invalid selection"
        dr, dc = r2 - r1, c2 - c1
        if dr % 2 or dc % 2 or (dr // 2, dc // 2) not in JUMPS:
            return "Not a valid jump"
        mid = self.board[r1 + dr // 2][c1 + dc // 2]
        if mid not in FROGS:
            return "Cannot jump an empty space"
        if self.board[r2][c2] != EMPTY:
            return "Not a valid space to jump to"
        if mid == RED_FROG:
            return "Cannot jump the red frog"
        return None

    def jump(self, src: Square, dst: Square) -> HoppersConfig:
        """New configuration after src jumps to dst. No legality check."""
        (r1, c1), (r2, c2) = src, dst
        frog = self.board[r1][c1]
        rows = [list(row) for row in self.board]
        rows[r1][c1] = EMPTY
        rows[(r1 + r2) // 2][(c1 + c2) // 2] = EMPTY
        rows[r2][c2] = frog
        return HoppersConfig(tuple(tuple(row) for row in rows))

    def jumps_from(self, r: int, c: int) -> List[Square]:
        out: List[Square] = []
        for dr, dc in JUMPS:
            r2, c2 = r + 2 * dr, c + 2 * dc
            if not self._inside(r2, c2):
                continue
            if self.board[r + dr][c + dc] == GREEN_FROG and self.board[r2][c2] == EMPTY:
                out.append((r2, c2))
        return out

    # ---------- configuration contract ----------
    def is_goal(self) -> bool:
        return all(GREEN_FROG not in row for row in self.board)

    def neighbors(self) -> List[HoppersConfig]:
        out: List[HoppersConfig] = []
        for r, row in enumerate(self.board):
            for c, t in enumerate(row):
                if t in FROGS:
                    out.extend(self.jump((r, c), dst) for dst in self.jumps_from(r, c))
        return out

    def render(self) -> str:
        _, C = self.dimensions
        lines = ["    " + " ".join(str(c) for c in range(C)),
                 "  " + "--" * C]
        for r, row in enumerate(self.board):
            lines.append(f"{r} | " + " ".join(row))
        return "\n".join(lines)


def load_hoppers(path: Path | str) -> HoppersConfig:
    return HoppersConfig(read_board(path, alphabet=EMPTY + INVALID + FROGS))
