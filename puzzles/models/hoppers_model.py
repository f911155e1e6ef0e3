from __future__ import annotations
from pathlib import Path

from puzzles.domains.hoppers import FROGS, HoppersConfig, load_hoppers
from puzzles.models.base import PuzzleModel, Square


class HoppersModel(PuzzleModel):
    config: HoppersConfig

    def load_config(self, path: Path) -> HoppersConfig:
        return load_hoppers(path)

    def can_select(self, square: Square):
        r, c = square
        R, C = self.config.dimensions
        if not (0 <= r < R and 0 <= c < C):
            return "Off the board"
        if self.config.cell(r, c) not in FROGS:
            return "Invalid selection"
        return None

    def try_move(self, src: Square, dst: Square):
        err = self.config.jump_error(src, dst)
        if err:
            return None, err
        return self.config.jump(src, dst), f"Jumped from {src} to {dst}"
