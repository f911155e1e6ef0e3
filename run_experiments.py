#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("Clock", "python -m puzzles.experiments.runner --domain clock --sizes 12 24 48 96 192 --per_size 20 --out results/clock.csv")
    run("Strings", "python -m puzzles.experiments.runner --domain strings --sizes 1 2 3 --per_size 5 --out results/strings.csv")
    run("Chess", "python -m puzzles.experiments.runner --domain chess --files data/chess-*.txt --out results/chess.csv")
    run("Hoppers", "python -m puzzles.experiments.runner --domain hoppers --files data/hoppers-*.txt --out results/hoppers.csv")
    run("Plots", "python -m puzzles.experiments.plot results/clock.csv results/strings.csv --save results/plots")

if __name__ == "__main__":
    main()
