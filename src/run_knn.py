# src/run_knn.py
import argparse
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .curves import curves_to_frame
from .model_data import BUILDERS
from .validation import rmse_table

# ---------- tiny utilities ----------
def results_dir(outdir=None):
    d = Path(outdir) if outdir else Path(__file__).resolve().parents[1] / "results"
    d.mkdir(parents=True, exist_ok=True)
    return d

def fmt(value):
    return "no prediction" if value is None else f"{value:,.3f}"

def print_neighbors(neighbors):
    for nb in neighbors:
        print(f"  #{nb.index:>2}  x={nb.x:5.2f}  y={nb.y:5.2f}  d={nb.distance:.3f}")

def hyperparameter(model_data, args):
    return args.k if model_data.param_name == "k" else args.radius

def predict_with(model_data, query_x, value):
    if model_data.param_name == "k":
        return model_data.knn_predict(query_x, value), model_data.get_neighbors(query_x, value)
    return model_data.radius_predict(query_x, value), model_data.get_radius_neighbors(query_x, value)

def build(args):
    build_fn = BUILDERS[args.model]
    return build_fn() if args.seed is None else build_fn(seed=args.seed)

# ---------- plotting ----------
def plot_curves(model_data, out_path):
    name = model_data.param_name
    df = curves_to_frame(model_data.prediction_curves, param_name=name)
    xs = np.array([p.x for p in model_data.points])
    ys = np.array([p.y for p in model_data.points])
    cfg = model_data.config

    plt.figure(figsize=(cfg.width / 100, cfg.height / 100))
    plt.scatter(xs, ys, s=18, color=cfg.accent_color, label="Datos", zorder=3)
    for value, grp in df.groupby(name, sort=False):
        # NaN gaps break the line instead of bridging it
        plt.plot(grp["x"], grp["y"], linewidth=1.2, label=f"{name}={value:g}")
    plt.xlim(*cfg.x_domain)
    plt.ylim(*cfg.y_domain)
    plt.xlabel(cfg.x_label)
    plt.ylabel(cfg.y_label)
    plt.title(f"Curvas de predicción - {name}")
    plt.grid(True, alpha=0.3)
    plt.legend(fontsize=8)
    plt.tight_layout(); plt.savefig(out_path, dpi=150); plt.close()

# ---------- main pipeline ----------
def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--model", required=True, choices=sorted(BUILDERS))
    ap.add_argument("--mode", required=True, choices=["summary", "predict", "curves"])
    ap.add_argument("--seed", type=int, help="override the dataset seed")
    ap.add_argument("--query-x", type=float, help="query x for mode=predict")
    ap.add_argument("--k", type=int, help="k for --model knn --mode predict")
    ap.add_argument("--radius", type=float, help="radius for --model radius --mode predict")
    ap.add_argument("--outdir", type=str, help="where curves CSV/PNG go (default: results/)")
    args = ap.parse_args(argv)

    if args.mode == "predict":
        if args.query_x is None:
            ap.error("--query-x is required for --mode predict")
        if args.model == "knn" and args.k is None:
            ap.error("--k is required for --model knn --mode predict")
        if args.model == "radius" and args.radius is None:
            ap.error("--radius is required for --model radius --mode predict")
        if args.k is not None and args.k <= 0:
            ap.error("--k must be a positive integer")
        if args.radius is not None and args.radius < 0:
            ap.error("--radius must be >= 0")

    data = build(args)
    name = data.param_name

    if args.mode == "predict":
        value = hyperparameter(data, args)
        pred, neighbors = predict_with(data, args.query_x, value)
        print(f"[My Model] x={args.query_x:g} | {name}={value:g} | prediction={fmt(pred)}")
        print_neighbors(neighbors)
        return 0

    if args.mode == "summary":
        default = getattr(data, f"default_{name}")
        print(f"[My Model] {args.model} | n={data.stats.n}")
        print(f"Default query x={data.default_query_x:g} | {name}={default:g} | prediction={fmt(data.default_query_y)}")
        print_neighbors(data.default_neighbors)
        print("\nLeave-one-out RMSE")
        for _, row in rmse_table(data).iterrows():
            print(f"{name}={row[name]:>4g} | LOO RMSE={row['loo_rmse']:,.3f}")
        return 0

    # curves
    out = results_dir(args.outdir)
    csv_path = out / f"predictionCurves_{args.model}.csv"
    curves_to_frame(data.prediction_curves, param_name=name).to_csv(csv_path, index=False)
    print(f"[My Model] Saved prediction curves → {csv_path}")
    png_path = out / f"predictionCurves_{args.model}.png"
    plot_curves(data, png_path)
    print(f"[My Model] Saved curve plot → {png_path}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
