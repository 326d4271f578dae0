import enum
import logging
import time

from . import settings
from .counters import MultiplicationOutcome, OperationCounters
from .errors import ConformabilityError, UnknownStrategy
from .matrix import Matrix

_log = logging.getLogger(__name__)


class Strategy(enum.Enum):
    TRADITIONAL = "traditional"
    STRASSEN = "strassen"
    WINOGRAD_STRASSEN = "winograd_strassen"

    @classmethod
    def parse(cls, value) -> "Strategy":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownStrategy(f"unknown multiplication strategy: {value!r}")


def next_pow2(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


# ---------- counted primitives ----------
def _add(x: Matrix, y: Matrix, counters: OperationCounters) -> Matrix:
    counters.count_additions(x.size)
    return x + y


def _sub(x: Matrix, y: Matrix, counters: OperationCounters) -> Matrix:
    counters.count_additions(x.size)  # subtraction counts as an addition
    return x - y


def traditional(a: Matrix, b: Matrix, counters: OperationCounters) -> Matrix:
    """Schoolbook product, one multiply per (i, j, k) and one add per k after the first."""
    rows, inner, columns = a.rows, a.columns, b.columns
    counters.count_multiplications(rows * columns * inner)
    counters.count_additions(rows * columns * max(inner - 1, 0))
    return a.matmul_kernel(b)


# ---------- divide and conquer ----------
def strassen_square(A: Matrix, B: Matrix, counters: OperationCounters, threshold: int,
                    logger=_log, depth: int = 0) -> Matrix:
    n = A.rows
    if n == 1:
        counters.count_multiplications()
        return Matrix.from_grid([[A[0, 0] * B[0, 0]]])
    if n <= threshold:
        logger.debug(f"[depth={depth}] base n={n}")
        return traditional(A, B, counters)

    A11, A12, A21, A22 = A.split()
    B11, B12, B21, B22 = B.split()
    logger.debug(f"[depth={depth}] split n={n} -> {n // 2}")

    def rec(X, Y):
        return strassen_square(X, Y, counters, threshold, logger, depth + 1)

    M1 = rec(_add(A11, A22, counters), _add(B11, B22, counters))
    M2 = rec(_add(A21, A22, counters), B11)
    M3 = rec(A11, _sub(B12, B22, counters))
    M4 = rec(A22, _sub(B21, B11, counters))
    M5 = rec(_add(A11, A12, counters), B22)
    M6 = rec(_sub(A21, A11, counters), _add(B11, B12, counters))
    M7 = rec(_sub(A12, A22, counters), _add(B21, B22, counters))

    C11 = _add(_sub(_add(M1, M4, counters), M5, counters), M7, counters)
    C12 = _add(M3, M5, counters)
    C21 = _add(M2, M4, counters)
    C22 = _add(_add(_sub(M1, M2, counters), M3, counters), M6, counters)
    return Matrix.combine(C11, C12, C21, C22)


def winograd_square(A: Matrix, B: Matrix, counters: OperationCounters, threshold: int,
                    logger=_log, depth: int = 0) -> Matrix:
    """Winograd's form of Strassen: 7 products, 15 block additions per level."""
    n = A.rows
    if n == 1:
        counters.count_multiplications()
        return Matrix.from_grid([[A[0, 0] * B[0, 0]]])
    if n <= threshold:
        logger.debug(f"[depth={depth}] base n={n}")
        return traditional(A, B, counters)

    A11, A12, A21, A22 = A.split()
    B11, B12, B21, B22 = B.split()
    logger.debug(f"[depth={depth}] split n={n} -> {n // 2}")

    S1 = _add(A21, A22, counters)
    S2 = _sub(S1, A11, counters)
    S3 = _sub(A11, A21, counters)
    S4 = _sub(A12, S2, counters)

    T1 = _sub(B12, B11, counters)
    T2 = _sub(B22, T1, counters)
    T3 = _sub(B22, B12, counters)
    T4 = _sub(T2, B21, counters)

    def rec(X, Y):
        return winograd_square(X, Y, counters, threshold, logger, depth + 1)

    P1 = rec(A11, B11)
    P2 = rec(A12, B21)
    P3 = rec(S4, B22)
    P4 = rec(A22, T4)
    P5 = rec(S1, T1)
    P6 = rec(S2, T2)
    P7 = rec(S3, T3)

    U2 = _add(P1, P6, counters)
    U3 = _add(U2, P7, counters)
    U4 = _add(U2, P5, counters)

    C11 = _add(P1, P2, counters)
    C12 = _add(U4, P3, counters)
    C21 = _sub(U3, P4, counters)
    C22 = _add(U3, P5, counters)
    return Matrix.combine(C11, C12, C21, C22)


_RECURSIVE = {
    Strategy.STRASSEN: strassen_square,
    Strategy.WINOGRAD_STRASSEN: winograd_square,
}


def _cutover(strategy: Strategy) -> int:
    if strategy is Strategy.STRASSEN:
        return settings.STRASSEN_CUTOVER
    return settings.WINOGRAD_CUTOVER


def multiply(a: Matrix, b: Matrix, strategy, threshold: int = None, logger=None,
             counters: OperationCounters = None) -> MultiplicationOutcome:
    """Multiply a by b with the chosen strategy and report what it cost.

    Strassen and Winograd-Strassen pad square operands to the next power of
    two; non-square operands are multiplied by the schoolbook method. The
    operation counts cover the padded working size, the returned matrix is
    trimmed back to a.rows x b.columns.

    A caller-supplied counters instance is reset once the operands are
    accepted and holds this call's tally afterwards.
    """
    strategy = Strategy.parse(strategy)
    if a.columns != b.rows:
        raise ConformabilityError(
            f"cannot multiply {a.rows}x{a.columns} by {b.rows}x{b.columns}: "
            "columns of the first must equal rows of the second"
        )
    logger = logger or _log
    if counters is None:
        counters = OperationCounters()
    counters.reset()
    original_size = a.rows

    recursive = _RECURSIVE.get(strategy)
    if recursive is not None and a.is_square and b.is_square:
        n = a.rows
        P = next_pow2(n)
        if P != n:
            logger.debug(f"Padding from {n} to {P} (power-of-two)")
            A, B = a.padded(P), b.padded(P)
        else:
            A, B = a, b
        limit = _cutover(strategy) if threshold is None else threshold
        t0 = time.perf_counter()
        C = recursive(A, B, counters, limit, logger)
        t1 = time.perf_counter()
    else:
        if recursive is not None:
            logger.debug(f"{strategy.value}: non-square {a.shape} x {b.shape}, using schoolbook")
        t0 = time.perf_counter()
        C = traditional(a, b, counters)
        t1 = time.perf_counter()

    actual_size = C.rows
    if C.rows > a.rows or C.columns > b.columns:
        C = C.submatrix(0, 0, a.rows, b.columns)

    return MultiplicationOutcome(
        result=C,
        elapsed_ms=(t1 - t0) * 1000.0,
        strategy=strategy,
        multiplications=counters.multiplications,
        additions=counters.additions,
        original_size=original_size,
        actual_size=actual_size,
    )
