from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from puzzles.domains.boards import PuzzleFileError
from puzzles.search.bfs import solve

logger = logging.getLogger(__name__)

Square = Tuple[int, int]
Observer = Callable[["PuzzleModel", str], None]


class PuzzleModel:
    """
    Interactive puzzle session over a board file. Front ends register
    observers and get (model, message) after every command; illegal moves
    are reported as messages, never raised.

    Subclasses provide `load_config(path)`, `can_select(square)` (error
    message or None) and `try_move(src, dst) -> (new_config or None, message)`.
    """

    def __init__(self, path: Path | str):
        self.observers: List[Observer] = []
        self.path = Path(path)
        self.config = self.load_config(self.path)
        self.selected: Optional[Square] = None

    # ---------- hooks ----------
    def load_config(self, path: Path):
        raise NotImplementedError

    def can_select(self, square: Square) -> Optional[str]:
        raise NotImplementedError

    def try_move(self, src: Square, dst: Square):
        raise NotImplementedError

    # ---------- observers ----------
    def add_observer(self, observer: Observer) -> None:
        self.observers.append(observer)

    def alert_observers(self, msg: str) -> None:
        logger.info("%s: %s", type(self).__name__, msg)
        for obs in self.observers:
            obs(self, msg)

    # ---------- commands ----------
    def _read(self, path: Path) -> bool:
        """Replace the puzzle with the one in `path`; on failure keep it and report."""
        try:
            config = self.load_config(path)
        except (OSError, PuzzleFileError) as e:
            self.alert_observers(f"Failed to load: {path} ({e})")
            return False
        self.config, self.path, self.selected = config, path, None
        return True

    def load(self, path: Path | str) -> bool:
        path = Path(path)
        if not self._read(path):
            return False
        self.alert_observers(f"Loaded: {path}")
        return True

    def reset(self) -> bool:
        """Reread the current file."""
        if not self._read(self.path):
            return False
        self.alert_observers("Puzzle reset!")
        return True

    def hint(self) -> None:
        """Advance one move along a fresh shortest solution."""
        self.selected = None
        if self.config.is_goal():
            self.alert_observers("Already solved!")
            return
        result = solve(self.config)
        if not result.solved:
            self.alert_observers("No solution")
            return
        self.config = result.path[1]
        self.alert_observers("Next step!")

    def select(self, r: int, c: int) -> None:
        """First call picks the source square, second call moves from it to (r, c)."""
        if self.selected is None:
            err = self.can_select((r, c))
            if err:
                self.alert_observers(err)
                return
            self.selected = (r, c)
            self.alert_observers(f"Selected ({r}, {c})")
            return
        src, self.selected = self.selected, None
        new_config, msg = self.try_move(src, (r, c))
        if new_config is not None:
            self.config = new_config
        self.alert_observers(msg)

    def __str__(self) -> str:
        return self.config.render()
