import json
import uuid

import azure.functions as func

from fastmatmul import MatrixError, Strategy, multiply, settings
from fastmatmul.generator import random_pair
from fastmatmul.logs import cd, get_logger, jlog
from fastmatmul.report import build_report, performance_summary, report_name
from fastmatmul.storage import upload_text
from fastmatmul.validation import validate_generation


def aligned_side(side: int, minimum: int = None) -> int:
    """Smallest power of two that is at least side and at least minimum."""
    size = settings.MIN_GENERATED_SIDE if minimum is None else minimum
    while size < side:
        size *= 2
    return size


def run_benchmark(rows: int, columns: int, min_value: float, max_value: float,
                  strategies, seed=None, logger=None, align_pow2: bool = True):
    """Generate one random pair and multiply it with every requested strategy.

    With align_pow2, a square request that includes a Strassen-family
    strategy is generated at the next power-of-two side so no run pads.
    Returns (A, B, outcomes) with outcomes keyed by Strategy in request order.
    """
    logger = logger or get_logger("benchmark_run")
    validate_generation(rows, columns, min_value, max_value, settings.MIN_GENERATED_SIDE)
    chosen = [Strategy.parse(s) for s in strategies]
    if not chosen:
        raise ValueError("At least one strategy is required.")

    if align_pow2 and rows == columns and any(s is not Strategy.TRADITIONAL for s in chosen):
        side = aligned_side(rows)
        if side != rows:
            logger.info(f"Square side raised from {rows} to {side} for the divide-and-conquer methods")
            rows = columns = side

    A, B = random_pair(rows, columns, min_value, max_value, seed)
    logger.info(f"Generated A {A.rows}x{A.columns} and B {B.rows}x{B.columns}")
    outcomes = {}
    for strategy in chosen:
        outcome = multiply(A, B, strategy, logger=logger)
        outcomes[strategy] = outcome
        logger.info(f"{strategy.value}: {outcome.elapsed_ms:.1f} ms, "
                    f"{outcome.total_operations:,} ops (size {outcome.original_size} -> {outcome.actual_size})")
    return A, B, outcomes


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("benchmark_run")
    run_id = f"bench-{uuid.uuid4().hex[:8]}"
    try:
        data = req.get_json()
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object.")
        rows = int(data.get("rows", settings.MIN_GENERATED_SIDE))
        columns = int(data.get("columns", rows))
        min_value = float(data.get("min_value", settings.DEFAULT_MIN_VALUE))
        max_value = float(data.get("max_value", settings.DEFAULT_MAX_VALUE))
        strategies = data.get("strategies") or [s.value for s in Strategy]
        if isinstance(strategies, str):
            strategies = [strategies]
        seed = data.get("seed")
        save = bool(data.get("save", True))
        align_pow2 = bool(data.get("align_pow2", True))

        logger.info("benchmark_run.begin", extra=cd(runId=run_id, rows=rows, columns=columns))
        A, B, outcomes = run_benchmark(rows, columns, min_value, max_value, strategies, seed, logger, align_pow2)
        selected = next(iter(outcomes))

        report_blob = None
        if save:
            text = build_report(A, B, outcomes, selected, min_value, max_value,
                                result=outcomes[selected].result)
            report_blob = f"{run_id}/{report_name(A, selected)}"
            upload_text(settings.REPORT_CONTAINER, report_blob, text)
            report_blob = f"{settings.REPORT_CONTAINER}/{report_blob}"

        jlog({
            "run_id": run_id, "op": "benchmark_run",
            "rows": A.rows, "columns": A.columns,
            "results": {s.value: {"elapsed_ms": round(o.elapsed_ms, 3),
                                  "multiplications": o.multiplications,
                                  "additions": o.additions,
                                  "actual_size": o.actual_size} for s, o in outcomes.items()},
            "report": report_blob,
        }, logger_name="benchmark_run")

        body = {
            "run_id": run_id,
            "shape_a": [A.rows, A.columns],
            "shape_b": [B.rows, B.columns],
            "results": [o.as_dict(render="short", max_elements=settings.SHORT_RENDER_LIMIT)
                        for o in outcomes.values()],
            "summary": performance_summary(outcomes, selected),
            "report": report_blob,
        }
        logger.info("benchmark_run.end", extra=cd(runId=run_id, strategies=len(outcomes)))
        return func.HttpResponse(json.dumps(body), status_code=200, mimetype="application/json")
    except (MatrixError, ValueError, TypeError) as e:
        logger.warning(f"benchmark_run rejected request: {e}")
        return func.HttpResponse(f"Error: {str(e)}", status_code=400)
    except Exception as e:
        logger.exception("benchmark_run failed")
        return func.HttpResponse(f"Error: {str(e)}", status_code=500)
