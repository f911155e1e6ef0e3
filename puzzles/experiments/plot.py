#!/usr/bin/env python3
import sys, csv, os, argparse
from pathlib import Path
from collections import defaultdict
import statistics

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["total_generated", "unique_visited", "time_sec"]


def _to_int(x):
    try: return int(x)
    except (TypeError, ValueError): return None

def _to_float(x):
    try: return float(x)
    except (TypeError, ValueError): return None

def read_rows_one(path):
    rows = []
    with open(path, newline="") as f:
        r = csv.DictReader(f)
        for row in r:
            domain = row.get("domain", "")
            size = _to_int(row.get("size"))
            if not domain or size is None:
                continue
            rows.append({
                "domain": domain,
                "size": size,
                "path_len": _to_int(row.get("path_len")),
                "total_generated": _to_int(row.get("total_generated")),
                "unique_visited": _to_int(row.get("unique_visited")),
                "time_sec": _to_float(row.get("time_sec")),
            })
    return rows

def read_rows(paths):
    out = []
    for p in paths:
        out.extend(read_rows_one(p))
    return out

def agg_mean(rows, metric):
    """domain -> (sizes, means, stds)"""
    buckets = defaultdict(lambda: defaultdict(list))
    for r in rows:
        v = r.get(metric)
        if v is None:
            continue
        buckets[r["domain"]][r["size"]].append(v)
    series = {}
    for domain, by_size in buckets.items():
        xs = sorted(by_size)
        ys = [statistics.mean(by_size[x]) for x in xs]
        es = [statistics.pstdev(by_size[x]) if len(by_size[x]) > 1 else 0.0 for x in xs]
        series[domain] = (xs, ys, es)
    return series

def plot_metric(ax, rows, metric):
    for domain, (xs, ys, es) in sorted(agg_mean(rows, metric).items()):
        ax.errorbar(xs, ys, yerr=es, marker="o", capsize=3, label=domain)
    ax.set_xlabel("Size")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs size (mean ± std)")
    ax.grid(True)
    ax.legend()

def plot_waste(ax, rows):
    """Share of generated states that were re-derivations of visited ones."""
    for domain in sorted({r["domain"] for r in rows}):
        pts = sorted((r["size"], 1 - r["unique_visited"] / r["total_generated"])
                     for r in rows
                     if r["domain"] == domain and r["total_generated"]
                     and r["unique_visited"] is not None)
        if pts:
            ax.plot([p[0] for p in pts], [p[1] for p in pts], "o", label=domain)
    ax.set_xlabel("Size")
    ax.set_ylabel("duplicate share")
    ax.set_title("1 - unique/total")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str):
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    rows = read_rows(args.csv)
    if not rows:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 4, figsize=(20, 5))
    for ax, metric in zip(axes, METRICS):
        plot_metric(ax, rows, metric)
    plot_waste(axes[3], rows)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")
    plt.close(fig)

    for metric in METRICS:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, rows, metric)
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        plt.close(fig)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
