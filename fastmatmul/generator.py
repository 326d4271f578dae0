import numpy as np

from .errors import InvalidDimension, InvalidValueRange
from .matrix import Matrix


def random_matrix(rows: int, columns: int, min_value: float = -10.0, max_value: float = 10.0,
                  seed=None) -> Matrix:
    """Matrix with elements drawn uniformly from [min_value, max_value)."""
    if rows <= 0 or columns <= 0:
        raise InvalidDimension(f"matrix dimensions must be positive, got {rows}x{columns}")
    if min_value >= max_value:
        raise InvalidValueRange(f"min_value ({min_value}) must be less than max_value ({max_value})")
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    return Matrix.from_grid(rng.uniform(min_value, max_value, (rows, columns)))


def random_pair(rows: int, columns: int, min_value: float = -10.0, max_value: float = 10.0,
                seed=None):
    """A (rows x columns) and B (columns x rows), so A @ B is always defined."""
    rng = np.random.default_rng(seed)
    matrix_a = random_matrix(rows, columns, min_value, max_value, rng)
    matrix_b = random_matrix(columns, rows, min_value, max_value, rng)
    return matrix_a, matrix_b
