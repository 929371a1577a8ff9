# FILE: experiments/reproduce_rescale_case.py
#!/usr/bin/env python3
"""
experiments/reproduce_rescale_case.py

Generic rescale case harness.

Given a case directory (data/raw/<case_id>/metadata.yaml), this script:
- synthesizes reference_expanded, reference_collapsed and target_collapsed
  from tone lists (dc + cosines, frequencies in cycles/sample)
- runs rescale for every (strategy, order) pair in the sweep
- checks the order=0 and full-order invariants
- writes an audit CSV (schema locked) and an overlay figure (git-ignored)

Outputs (git-ignored):
- figures/derived/<case_id>_overlay.png
- outputs/<case_id>_run.csv
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple
import argparse
import csv
import math

import numpy as np
import matplotlib.pyplot as plt
import yaml

from spectral_rescale import STRATEGY_IDS, RescaleConfig, RescaleResult, rescale_with_config
from spectral_rescale.diagnostics import mean_shift, rms_difference
from spectral_rescale.transform import n_bins

REPO_ROOT = Path(__file__).resolve().parents[1]
FIG_DIR = REPO_ROOT / "figures" / "derived"
OUT_DIR = REPO_ROOT / "outputs"

# (frequency cycles/sample, amplitude, phase rad)
Tone = Tuple[float, float, float]


def banner(tag: str, **kv: object) -> None:
    items = " ".join([f"{k}={v}" for k, v in kv.items()])
    print(f"[{tag}] {items}".rstrip())


@dataclass(frozen=True)
class SeriesConfig:
    n: int
    dc: float
    tones: Tuple[Tone, ...]


@dataclass(frozen=True)
class CaseConfig:
    case_id: str
    reference_expanded: SeriesConfig
    reference_collapsed: SeriesConfig
    target_collapsed: SeriesConfig
    strategies: Tuple[str, ...]
    orders: Tuple[Optional[int], ...]
    atol: float


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def _series_config(node: dict, *, name: str) -> SeriesConfig:
    if "n" not in node:
        raise ValueError(f"metadata.yaml: series.{name} missing n")
    n = int(node["n"])
    if n < 2:
        raise ValueError(f"series.{name}.n must be >= 2")
    tones: List[Tone] = []
    for t in node.get("tones", []) or []:
        f = float(t["f"])
        if not (0.0 <= f <= 0.5):
            raise ValueError(f"series.{name}: tone frequency must be in [0, 0.5] cycles/sample, got {f}")
        tones.append((f, float(t.get("amplitude", 1.0)), float(t.get("phase", 0.0))))
    return SeriesConfig(n=n, dc=float(node.get("dc", 0.0)), tones=tuple(tones))


def load_case_config(case_dir: Path) -> CaseConfig:
    meta_path = case_dir / "metadata.yaml"
    if not meta_path.exists():
        raise FileNotFoundError(f"Missing metadata: {meta_path}")
    meta = yaml.safe_load(meta_path.read_text())

    series = meta.get("series", {}) or {}
    sweep = meta.get("rescale", {}) or {}

    case_id = str(meta.get("case_id", case_dir.name)).strip()
    if not case_id:
        raise ValueError("metadata.yaml missing case_id (and directory name is empty?)")

    ref_e = _series_config(series.get("reference_expanded", {}) or {}, name="reference_expanded")
    ref_c = _series_config(series.get("reference_collapsed", {}) or {}, name="reference_collapsed")
    tgt_c = _series_config(series.get("target_collapsed", {}) or {}, name="target_collapsed")

    strategies = tuple(str(s) for s in sweep.get("strategies", list(STRATEGY_IDS)))
    for s in strategies:
        RescaleConfig(strategy=s).validate()  # type: ignore[arg-type]

    # null / "all" in the YAML list means "all available components"
    orders: List[Optional[int]] = []
    for o in sweep.get("orders", [0, None]):
        orders.append(None if o is None or o == "all" else int(o))

    atol = float(sweep.get("atol", 1.0e-9))
    if atol <= 0.0:
        raise ValueError("rescale.atol must be > 0")

    if ref_c.n != tgt_c.n:
        raise ValueError("reference_collapsed.n and target_collapsed.n must match")
    if ref_e.n < ref_c.n:
        raise ValueError("reference_expanded.n must be >= reference_collapsed.n")
    max_order = n_bins(ref_c.n)
    bad = [o for o in orders if o is not None and not (0 <= o <= max_order)]
    if bad:
        raise ValueError(f"rescale.orders out of range [0, {max_order}]: {bad}")

    return CaseConfig(
        case_id=case_id,
        reference_expanded=ref_e,
        reference_collapsed=ref_c,
        target_collapsed=tgt_c,
        strategies=strategies,
        orders=tuple(orders),
        atol=atol,
    )


def synthesize(cfg: SeriesConfig) -> np.ndarray:
    """x[i] = dc + sum a cos(2π f i + φ), i = 0..n-1."""
    i = np.arange(cfg.n, dtype=float)
    x = np.full(cfg.n, cfg.dc, dtype=float)
    for f, a, phi in cfg.tones:
        x += a * np.cos(2.0 * math.pi * f * i + phi)
    return x


def write_case_csv(
    path: Path,
    *,
    rows: List[Tuple[str, Optional[int], RescaleResult]],
    reference_expanded: np.ndarray,
    expected_shift: float,
) -> None:
    """
    Audit CSV schema (locked):

      strategy          str
      order             int or "all"
      n_components      int
      n_applied_bins    int
      mean_shift        float   mean(result) - mean(reference_expanded)
      expected_shift    float   mean(target_collapsed) - mean(reference_collapsed)
      rms_vs_reference  float
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.writer(f)
        w.writerow(
            [
                "strategy",
                "order",
                "n_components",
                "n_applied_bins",
                "mean_shift",
                "expected_shift",
                "rms_vs_reference",
            ]
        )
        for strategy, order, res in rows:
            if res.series.shape != reference_expanded.shape:
                raise ValueError("CSV write: result length differs from reference_expanded.")
            w.writerow(
                [
                    strategy,
                    "all" if order is None else int(order),
                    int(res.n_components),
                    len(res.applied),
                    f"{mean_shift(res.series, reference_expanded):.12e}",
                    f"{expected_shift:.12e}",
                    f"{rms_difference(res.series, reference_expanded):.12e}",
                ]
            )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--case-dir", required=True, help="Case directory under data/raw/ (or absolute path)")
    ap.add_argument("--no-plot", action="store_true", help="Skip the overlay figure.")
    args = ap.parse_args()

    case_dir_arg = Path(args.case_dir)
    case_dir = (REPO_ROOT / case_dir_arg).resolve() if not case_dir_arg.is_absolute() else case_dir_arg.resolve()
    if not case_dir.exists():
        raise FileNotFoundError(f"Case dir not found: {case_dir}")

    cfg = load_case_config(case_dir)
    ref_e = synthesize(cfg.reference_expanded)
    ref_c = synthesize(cfg.reference_collapsed)
    tgt_c = synthesize(cfg.target_collapsed)
    expected_shift = float(np.mean(tgt_c) - np.mean(ref_c))

    banner(
        "RESCALE_CASE",
        case_id=cfg.case_id,
        n_expanded=ref_e.size,
        n_collapsed=ref_c.size,
        strategies=",".join(cfg.strategies),
        orders=",".join("all" if o is None else str(o) for o in cfg.orders),
    )

    rows: List[Tuple[str, Optional[int], RescaleResult]] = []
    for strategy in cfg.strategies:
        for order in cfg.orders:
            res = rescale_with_config(ref_e, ref_c, tgt_c, RescaleConfig(order=order, strategy=strategy))  # type: ignore[arg-type]
            rows.append((strategy, order, res))

            # Invariant: nothing transferred -> reference comes back.
            if order == 0 and not np.allclose(res.series, ref_e, atol=cfg.atol):
                raise RuntimeError(f"{strategy}: order=0 did not reproduce reference_expanded")

    # Invariant: identical collapsed pair -> zero scaling -> reference comes back.
    for strategy in cfg.strategies:
        same = rescale_with_config(ref_e, ref_c, ref_c, RescaleConfig(strategy=strategy))  # type: ignore[arg-type]
        if not np.allclose(same.series, ref_e, atol=cfg.atol):
            raise RuntimeError(f"{strategy}: identical collapsed pair changed reference_expanded")

    ensure_dir(OUT_DIR)
    out_csv = OUT_DIR / f"{cfg.case_id}_run.csv"
    write_case_csv(out_csv, rows=rows, reference_expanded=ref_e, expected_shift=expected_shift)

    for strategy, order, res in rows:
        banner(
            "RESCALE_ROW",
            strategy=strategy,
            order="all" if order is None else order,
            n_components=res.n_components,
            n_applied_bins=len(res.applied),
            mean_shift=f"{mean_shift(res.series, ref_e):.6g}",
        )

    if not args.no_plot:
        ensure_dir(FIG_DIR)
        out_png = FIG_DIR / f"{cfg.case_id}_overlay.png"

        plt.figure(figsize=(9.0, 6.0))
        t_e = np.arange(ref_e.size) / ref_e.size
        t_c = np.arange(ref_c.size) / ref_c.size
        plt.plot(t_e, ref_e, linestyle="--", color="0.4", label="reference (expanded)")
        plt.plot(t_c, ref_c, marker="o", linestyle="none", color="0.4", label="reference (collapsed)")
        plt.plot(t_c, tgt_c, marker="s", linestyle="none", label="target (collapsed)")
        for strategy, order, res in rows:
            if order is not None:
                continue
            plt.plot(t_e, res.series, linestyle="-", label=f"rescaled: {strategy}, all components")

        plt.title(f"Rescale case {cfg.case_id}\n{ref_c.size} -> {ref_e.size} samples", fontsize=11)
        plt.xlabel("Normalized time (fraction of span)")
        plt.ylabel("Value")
        plt.legend(loc="upper center", bbox_to_anchor=(0.5, -0.14), ncol=2, fontsize=8, frameon=True)
        plt.tight_layout()
        plt.savefig(out_png, dpi=200, bbox_inches="tight")
        plt.close()
        banner("RESCALE_CASE_OUT", fig=str(out_png.relative_to(REPO_ROOT)), csv=str(out_csv.relative_to(REPO_ROOT)))
    else:
        banner("RESCALE_CASE_OUT", csv=str(out_csv.relative_to(REPO_ROOT)))

    print("Rescale case harness complete.")


if __name__ == "__main__":
    main()
