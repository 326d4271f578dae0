from dataclasses import dataclass

from .matrix import Matrix


class OperationCounters:
    """Scalar operation tally for one top-level multiply call.

    Each call owns its own instance and threads it through the recursion.
    """

    __slots__ = ("multiplications", "additions")

    def __init__(self):
        self.multiplications = 0
        self.additions = 0

    def reset(self):
        self.multiplications = 0
        self.additions = 0

    def count_multiplications(self, n: int = 1):
        self.multiplications += n

    def count_additions(self, n: int):
        self.additions += n

    @property
    def total(self) -> int:
        return self.multiplications + self.additions

    def __repr__(self):
        return f"OperationCounters(multiplications={self.multiplications}, additions={self.additions})"


@dataclass(frozen=True)
class MultiplicationOutcome:
    result: Matrix
    elapsed_ms: float
    strategy: "Strategy"  # noqa: F821
    multiplications: int
    additions: int
    original_size: int
    actual_size: int

    @property
    def total_operations(self) -> int:
        return self.multiplications + self.additions

    @property
    def padded(self) -> bool:
        return self.actual_size != self.original_size

    def as_dict(self, render: str = "short", max_elements: int = 10) -> dict:
        """JSON-ready view; render is 'short', 'full' or 'grid'."""
        if render == "grid":
            result = self.result.to_list()
        elif render == "full":
            result = self.result.render()
        elif render == "short":
            result = self.result.render_short(max_elements)
        else:
            raise ValueError(f"unknown render mode: {render!r}")
        return {
            "strategy": self.strategy.value,
            "elapsed_ms": round(self.elapsed_ms, 3),
            "multiplications": self.multiplications,
            "additions": self.additions,
            "total_operations": self.total_operations,
            "original_size": self.original_size,
            "actual_size": self.actual_size,
            "padded": self.padded,
            "shape": list(self.result.shape),
            "result": result,
        }
