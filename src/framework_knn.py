# src/framework_knn.py
import argparse

import numpy as np

from sklearn.neighbors import KNeighborsRegressor, RadiusNeighborsRegressor
from sklearn.model_selection import LeaveOneOut

from .model_data import BUILDERS

# ---------- data ----------
def to_arrays(points):
    X = np.array([[p.x] for p in points], dtype=float)
    y = np.array([p.y for p in points], dtype=float)
    return X, y

# ---------- leave-one-out with sklearn estimators ----------
def sklearn_loo_rmse_knn(points, k):
    X, y = to_arrays(points)
    sq_err = []
    for tr_idx, te_idx in LeaveOneOut().split(X):
        model = KNeighborsRegressor(n_neighbors=k, algorithm="brute")
        model.fit(X[tr_idx], y[tr_idx])
        yhat = model.predict(X[te_idx])
        sq_err.append((y[te_idx][0] - yhat[0]) ** 2)
    return float(np.sqrt(np.mean(sq_err)))

def sklearn_loo_rmse_radius(points, radius):
    """Points with no neighbor in range are skipped; inf if all are."""
    X, y = to_arrays(points)
    sq_err = []
    for tr_idx, te_idx in LeaveOneOut().split(X):
        model = RadiusNeighborsRegressor(radius=radius, algorithm="brute")
        model.fit(X[tr_idx], y[tr_idx])
        # sklearn would warn and return NaN for an empty neighborhood
        if len(model.radius_neighbors(X[te_idx], return_distance=False)[0]) == 0:
            continue
        yhat = model.predict(X[te_idx])
        sq_err.append((y[te_idx][0] - yhat[0]) ** 2)
    if not sq_err:
        return float("inf")
    return float(np.sqrt(np.mean(sq_err)))

def sklearn_default_prediction(model_data):
    X, y = to_arrays(model_data.points)
    Xq = np.array([[model_data.default_query_x]])
    if model_data.param_name == "k":
        model = KNeighborsRegressor(n_neighbors=model_data.default_k, algorithm="brute").fit(X, y)
    else:
        model = RadiusNeighborsRegressor(radius=model_data.default_radius, algorithm="brute").fit(X, y)
        if len(model.radius_neighbors(Xq, return_distance=False)[0]) == 0:
            return None
    return float(model.predict(Xq)[0])

def compare(model_data):
    """Rows of (hyperparameter, ours, sklearn) LOO RMSE."""
    sk_fn = sklearn_loo_rmse_knn if model_data.param_name == "k" else sklearn_loo_rmse_radius
    return [
        (v, model_data.compute_rmse(v), sk_fn(model_data.points, v))
        for v in model_data.hyperparameter_values
        if model_data.param_name != "k" or v < len(model_data.points)
    ]

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--model", required=True, choices=sorted(BUILDERS))
    ap.add_argument("--seed", type=int, help="override the dataset seed")
    args = ap.parse_args(argv)

    build_fn = BUILDERS[args.model]
    data = build_fn() if args.seed is None else build_fn(seed=args.seed)
    name = data.param_name

    sk_pred = sklearn_default_prediction(data)
    ours = data.default_query_y
    print(f"[Sklearn] default query x={data.default_query_x:g}")
    print(f"  ours   : {'no prediction' if ours is None else f'{ours:,.3f}'}")
    print(f"  sklearn: {'no prediction' if sk_pred is None else f'{sk_pred:,.3f}'}")

    print("\n[Sklearn] Leave-one-out RMSE (ours vs sklearn)")
    for value, mine, theirs in compare(data):
        print(f"{name}={value:>4g} | ours={mine:,.3f} | sklearn={theirs:,.3f}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
