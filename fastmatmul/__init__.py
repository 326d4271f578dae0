from .counters import MultiplicationOutcome, OperationCounters
from .engine import Strategy, multiply, next_pow2
from .errors import (
    ConformabilityError,
    DimensionMismatch,
    IndexOutOfRange,
    InvalidBounds,
    InvalidDimension,
    InvalidValueRange,
    MatrixError,
    UnknownStrategy,
)
from .matrix import Matrix

__version__ = "0.1.0"
