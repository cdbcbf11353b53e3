# src/validation.py
import math

import numpy as np
import pandas as pd

from .knn import check_k, check_radius


def _arrays(points):
    x = np.asarray([p.x for p in points], dtype=float)
    y = np.asarray([p.y for p in points], dtype=float)
    return x, y


def rmse(sse, count):
    return math.sqrt(sse / count) if count > 0 else math.inf


# ---------- leave-one-out ----------
def loo_rmse_knn(points, k):
    """LOO RMSE for k-NN: each point is predicted from the other n-1.

    The prediction divides by k, matching KNNRegressor.predict.
    """
    k = check_k(k)
    x, y = _arrays(points)
    n = len(x)
    sse = 0.0
    for i in range(n):
        pool = np.delete(np.arange(n), i)
        d = np.abs(x[i] - x[pool])
        nn_idx = pool[np.argsort(d, kind="stable")[:k]]
        pred = sum(y[nn_idx].tolist()) / k
        sse += (y[i] - pred) ** 2
    return rmse(float(sse), n)


def loo_rmse_radius(points, radius):
    """LOO RMSE for radius neighbors.

    Points with nobody else inside the radius are skipped entirely. If every
    point is skipped the error is math.inf.
    """
    r = check_radius(radius)
    x, y = _arrays(points)
    sse = 0.0
    counted = 0
    for i in range(len(x)):
        mask = np.abs(x[i] - x) <= r
        mask[i] = False
        if not mask.any():
            continue
        pred = sum(y[mask].tolist()) / int(mask.sum())
        sse += (y[i] - pred) ** 2
        counted += 1
    return rmse(float(sse), counted)


def rmse_table(model_data) -> pd.DataFrame:
    """LOO RMSE for every hyperparameter candidate of a model bundle."""
    name = model_data.param_name
    return pd.DataFrame(
        {
            name: list(model_data.hyperparameter_values),
            "loo_rmse": [model_data.compute_rmse(v) for v in model_data.hyperparameter_values],
        }
    )
