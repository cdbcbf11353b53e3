# src/data.py
import math
from dataclasses import dataclass
from typing import List, Tuple

KNN_SEED = 73
RADIUS_SEED = 99

# ---------- seeded generator ----------
class ParkMillerRandom:
    """Minimal-standard LCG: seed' = seed * 16807 mod (2^31 - 1).

    Outputs land in [0, 1) as (seed' - 1) / (2^31 - 2). Two instances built
    with the same seed produce the same sequence.
    """

    MULTIPLIER = 16807
    MODULUS = 2147483647

    def __init__(self, seed):
        self.seed = int(seed)

    def random(self):
        self.seed = (self.seed * self.MULTIPLIER) % self.MODULUS
        return (self.seed - 1) / (self.MODULUS - 1)


def round_half_up(value, digits=2):
    # same result as Math.round(v * 10^d) / 10^d, ties go towards +inf
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


# ---------- records ----------
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def rounded(cls, x, y):
        return cls(round_half_up(x), round_half_up(y))


@dataclass(frozen=True)
class DiagramConfig:
    """Styling handed through to whatever renders the diagram."""
    width: int = 800
    height: int = 380
    x_domain: Tuple[float, float] = (0, 10)
    y_domain: Tuple[float, float] = (0, 10)
    accent_color: str = "#f778ba"
    x_label: str = "Feature (x)"
    y_label: str = "Target (y)"

    def to_dict(self):
        return {
            "width": self.width,
            "height": self.height,
            "xDomain": list(self.x_domain),
            "yDomain": list(self.y_domain),
            "accentColor": self.accent_color,
            "xLabel": self.x_label,
            "yLabel": self.y_label,
        }


# ---------- synthetic datasets ----------
def _spaced(start, span, i, n):
    return start + (i / (n - 1)) * span


def make_knn_points(seed=KNN_SEED, n=30) -> Tuple[Point, ...]:
    """y = 2 sin(x) + 0.3 x + 3 + noise, x evenly spaced over [0.3, 9.7]."""
    rng = ParkMillerRandom(seed)
    points: List[Point] = []
    for i in range(n):
        x = _spaced(0.3, 9.4, i, n)
        noise = (rng.random() - 0.5) * 2.0
        y = 2 * math.sin(x) + 0.3 * x + 3 + noise
        points.append(Point.rounded(x, y))
    return tuple(points)


def _radius_target(x, noise):
    return 1.5 * math.sin(x * 1.2) + 0.4 * x + 2.5 + noise


def make_radius_points(seed=RADIUS_SEED, n_dense=20, n_sparse=15) -> Tuple[Point, ...]:
    """Dense block over [0.5, 4.0] followed by a sparse block over [5.0, 9.5].

    Both blocks draw from the same generator (dense first). The result is
    sorted by x so curves sweep left to right.
    """
    rng = ParkMillerRandom(seed)
    points: List[Point] = []
    for i in range(n_dense):
        x = _spaced(0.5, 3.5, i, n_dense)
        noise = (rng.random() - 0.5) * 1.6
        points.append(Point.rounded(x, _radius_target(x, noise)))
    for j in range(n_sparse):
        x = _spaced(5, 4.5, j, n_sparse)
        noise = (rng.random() - 0.5) * 2.0
        points.append(Point.rounded(x, _radius_target(x, noise)))
    return tuple(sorted(points, key=lambda p: p.x))
