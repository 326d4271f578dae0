"""Plain-text reports assembled from matrix renderings and outcome figures."""
from datetime import datetime

from .engine import Strategy

_LABELS = {
    Strategy.TRADITIONAL: "Traditional method",
    Strategy.STRASSEN: "Strassen method",
    Strategy.WINOGRAD_STRASSEN: "Winograd-Strassen method",
}


def strategy_label(strategy) -> str:
    return _LABELS[Strategy.parse(strategy)]


def report_name(a, strategy) -> str:
    return f"MatrixMultiplication_{a.rows}x{a.columns}_{Strategy.parse(strategy).value}.txt"


def _ranked(outcomes: dict):
    # most efficient first
    return sorted(outcomes.items(), key=lambda kv: kv[1].total_operations)


def _size_line(outcome) -> str:
    n, p = outcome.original_size, outcome.actual_size
    return f"{n}×{n}" + (f" (padded to {p}×{p})" if p != n else "")


def _strategy_block(strategy, outcome) -> list:
    return [
        f"{strategy_label(strategy)}:",
        f"  Execution time: {outcome.elapsed_ms:.2f} ms",
        f"  Multiplications: {outcome.multiplications:,}",
        f"  Additions: {outcome.additions:,}",
        f"  Total operations: {outcome.total_operations:,}",
        f"  Matrix size: {_size_line(outcome)}",
    ]


def performance_summary(outcomes: dict, selected) -> str:
    """Figures for the selected strategy, then a comparison of every strategy run so far."""
    if not outcomes:
        return ""
    selected = Strategy.parse(selected)
    lines = ["Practical complexity:", ""]
    if selected in outcomes:
        lines += _strategy_block(selected, outcomes[selected]) + [""]

    if len(outcomes) > 1:
        ranked = _ranked(outcomes)
        best, best_outcome = ranked[0]
        best_ops = best_outcome.total_operations
        lines += [
            "=== STRATEGY COMPARISON ===",
            f"Most efficient: {strategy_label(best)} ({best_ops:,} operations)",
            "",
            "Relative efficiency:",
        ]
        for strategy, outcome in ranked:
            ops = outcome.total_operations
            if strategy is best:
                status = " (most efficient)"
            else:
                status = f" ({ops / best_ops:.2f}x more operations)"
            lines.append(f"  {strategy_label(strategy)}: {ops:,} operations{status}")
        lines += ["", "Execution time:"]
        lines += [f"  {strategy_label(s)}: {o.elapsed_ms:.2f} ms" for s, o in ranked]
    return "\n".join(lines) + "\n"


def build_report(a, b, outcomes: dict, selected, min_value: float, max_value: float,
                 result=None, generated_at: datetime = None) -> str:
    """Full text report: inputs, product and performance of every strategy in outcomes."""
    selected = Strategy.parse(selected)
    generated_at = generated_at or datetime.now()
    lines = [
        "=== Fast matrix multiplication methods ===",
        f"Date: {generated_at:%Y-%m-%d %H:%M:%S}",
        "",
        f"Matrix dimensions: A({a.rows}×{a.columns}), B({b.rows}×{b.columns})",
        f"Multiplication method: {strategy_label(selected)}",
        f"Value range: from {min_value} to {max_value}",
        "",
        "=== Matrix A (full) ===",
        a.render(),
        "",
        "=== Matrix B (full) ===",
        b.render(),
        "",
    ]
    if result is not None:
        lines += ["=== Result C = A × B (full) ===", result.render(), ""]

    lines += ["=== PERFORMANCE RESULTS ===", ""]
    ranked = _ranked(outcomes)
    for strategy, outcome in ranked:
        lines += _strategy_block(strategy, outcome) + [""]

    if len(ranked) > 1:
        best, best_outcome = ranked[0]
        best_ops = best_outcome.total_operations
        lines += [
            "=== STRATEGY COMPARISON ===",
            "",
            f"Most efficient method: {strategy_label(best)} ({best_ops:,} operations)",
        ]
        for strategy, outcome in ranked[1:]:
            ratio = outcome.total_operations / best_ops
            lines.append(f"{strategy_label(strategy)} performs {ratio:.2f} times more operations")
        lines.append("")
    return "\n".join(lines) + "\n"
