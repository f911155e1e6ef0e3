from __future__ import annotations
from pathlib import Path

from puzzles.domains.chess import EMPTY, ChessConfig, load_chess
from puzzles.models.base import PuzzleModel, Square


class ChessModel(PuzzleModel):
    config: ChessConfig

    def load_config(self, path: Path) -> ChessConfig:
        return load_chess(path)

    def can_select(self, square: Square):
        r, c = square
        R, C = self.config.dimensions
        if not (0 <= r < R and 0 <= c < C):
            return "Off the board"
        if self.config.piece_at(r, c) == EMPTY:
            return "No piece there"
        return None

    def try_move(self, src: Square, dst: Square):
        if not self.config.is_valid_capture(src, dst):
            return None, f"Can't capture from {src} to {dst}"
        return self.config.capture(src, dst), f"Captured ({dst[0]}, {dst[1]})"
