#!/usr/bin/env python3
"""Plain-text console for the chess and hoppers models."""
from __future__ import annotations
import argparse, sys
from typing import Callable, Dict, TextIO

from puzzles.domains.boards import PuzzleFileError
from puzzles.models.base import PuzzleModel
from puzzles.models.chess_model import ChessModel
from puzzles.models.hoppers_model import HoppersModel

MODELS = {"chess": ChessModel, "hoppers": HoppersModel}

HELP = """\
h(int)              -- hint next move
l(oad) filename     -- load new puzzle file
s(elect) r c        -- select cell at r, c
q(uit)              -- quit the game
r(eset)             -- reset the current game"""


class PTUI:
    def __init__(self, model: PuzzleModel, out: TextIO = sys.stdout):
        self.model = model
        self.out = out
        model.add_observer(self.update)
        self.commands: Dict[str, Callable[[list], None]] = {
            "h": lambda a: model.hint(),
            "l": lambda a: model.load(a[0]),
            "s": self._select,
            "r": lambda a: model.reset(),
        }
        self.arity = {"h": 0, "l": 1, "s": 2, "r": 0}

    def update(self, model: PuzzleModel, msg: str) -> None:
        print(msg, file=self.out)
        print(model, file=self.out)

    def handle(self, line: str) -> bool:
        """Run one command line; False means quit."""
        words = line.split()
        if not words:
            return True
        key = words[0][0].lower()
        if key == "q":
            return False
        args = words[1:]
        if key not in self.commands or len(args) != self.arity[key]:
            print(HELP, file=self.out)
            return True
        self.commands[key](args)
        return True

    def _select(self, args: list) -> None:
        try:
            r, c = int(args[0]), int(args[1])
        except ValueError:
            print(HELP, file=self.out)
            return
        self.model.select(r, c)

    def run(self, inp: TextIO = sys.stdin) -> None:
        print(self.model, file=self.out)
        print(HELP, file=self.out)
        while True:
            print("> ", end="", file=self.out, flush=True)
            line = inp.readline()
            if not line or not self.handle(line):
                break


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Console front end for board puzzles")
    ap.add_argument("domain", choices=sorted(MODELS))
    ap.add_argument("filename")
    args = ap.parse_args(argv)
    try:
        model = MODELS[args.domain](args.filename)
    except (OSError, PuzzleFileError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return 1
    PTUI(model).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
