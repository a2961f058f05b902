#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Tuple

import argparse

import lunarcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "lunarcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "lunarcal[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np, start_year: int, end_year: int, provider: str) -> Dict[str, Tuple["np.ndarray", "np.ndarray", "np.ndarray"]]:
    """Per holiday name: (years, start day-of-year, length in days)."""
    rows: Dict[str, List[Tuple[int, int, int]]] = {}
    for Y in range(start_year, end_year + 1):
        for s in lunarcal.holiday_spans(Y, provider=provider):
            rows.setdefault(s.name, []).append((Y, day_of_year(s.start), s.days))

    out = {}
    for name, items in rows.items():
        arr = np.array(items, dtype=int)
        out[name] = (arr[:, 0], arr[:, 1], arr[:, 2])
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of built-in holiday runs across years.")
    p.add_argument("--from-year", type=int, default=2010)
    p.add_argument("--to-year", type=int, default=2026)
    p.add_argument("--provider", default="lunar")
    p.add_argument("--outbase", default="holiday_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    series = build_series(np, args.from_year, args.to_year, args.provider)
    if not series:
        print("No built-in holidays in range.")
        return 1

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 9,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year of first holiday day (Jan 1 = 1)")
    ax.set_title("Built-in holiday runs (marker size = length in days)")

    for name, (years, doy, length) in sorted(series.items()):
        ax.scatter(years, doy, s=12.0 * length, alpha=0.45, label=name)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
