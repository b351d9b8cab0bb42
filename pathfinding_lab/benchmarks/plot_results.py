# pathfinding_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
from pathlib import Path
from typing import Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from ..logging_config import get_logger, setup_logging

logger = get_logger(__name__)

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"


def load_rows(path: Path) -> List[Dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m pathfinding_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def mean_by_algo(rows: List[Dict], metric: str) -> Dict[str, float]:
    grouped: Dict[str, List[float]] = {}
    for r in rows:
        v = r.get(metric)
        if v is not None:
            grouped.setdefault(r["algo"], []).append(float(v))
    return {algo: float(np.mean(vals)) for algo, vals in grouped.items()}


def _bar(ax, values: Dict[str, float], title: str, ylabel: str):
    algos = sorted(values, key=values.get)
    vals = [values[a] for a in algos]

    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    # Value labels on top of bars
    top = max(vals) if vals else 1.0
    for xi, v in zip(x, vals):
        label = f"{v:.4f}" if v < 0.01 else f"{v:.3f}"
        ax.text(xi, v + 0.01 * (top or 1.0), label, ha="center", va="bottom", fontsize=8)


def fmt_table(rows: List[Dict]) -> str:
    # Markdown table
    lines = [
        "| Trial | Algorithm | Cost | Hops | Time (s) | Peak KB |",
        "|---:|---|---:|---:|---:|---:|",
    ]

    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"

    for r in rows:
        lines.append(
            f"| {r.get('trial', 'n/a')} | {r['algo']} | {fnum(r.get('cost'))} | "
            f"{fnum(r['path_length'] - 1) if r.get('path_length') else 'n/a'} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


def write_report(results: Path, out_dir: Path) -> List[Path]:
    rows = load_rows(results)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    written.append(md_path)

    for metric, title, ylabel, name in (
        ("time_s", "Mean Wall Time (lower is better)", "seconds", "time.png"),
        ("cost", "Mean Path Cost (should match)", "cost", "cost.png"),
    ):
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, mean_by_algo(rows, metric), title, ylabel)
        fig.tight_layout()
        (out_dir / name).write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        written.append(out_dir / name)

    for p in written:
        logger.info(f"Wrote {p}")
    return written


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Plot results.json written by run_all.")
    ap.add_argument("--results", default=str(RESULTS_JSON), help="path to results.json")
    ap.add_argument("--out-dir", default=None, help="output folder (default: next to results.json)")
    args = ap.parse_args(argv)

    setup_logging(level="INFO")
    results = Path(args.results)
    write_report(results, Path(args.out_dir) if args.out_dir else results.parent)


if __name__ == "__main__":
    main()
