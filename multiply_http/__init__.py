import json

import azure.functions as func

from fastmatmul import Matrix, MatrixError, multiply, settings
from fastmatmul.logs import cd, get_logger
from fastmatmul.validation import validate_matrices

RENDER_MODES = ("short", "full", "grid")


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("multiply_http")
    try:
        req_body = req.get_json()
        if not isinstance(req_body, dict):
            raise ValueError("Request body must be a JSON object.")
        matrix_a = req_body.get('matrix_a')
        matrix_b = req_body.get('matrix_b')
        strategy = req_body.get('strategy', settings.DEFAULT_STRATEGY)
        render = req_body.get('render', 'short')
        if render not in RENDER_MODES:
            raise ValueError(f"render must be one of {', '.join(RENDER_MODES)}")
        validate_matrices(matrix_a, matrix_b)

        outcome = multiply(Matrix.from_grid(matrix_a), Matrix.from_grid(matrix_b), strategy)
        logger.info("multiply_http.done", extra=cd(strategy=outcome.strategy.value,
                                                   n=outcome.original_size,
                                                   actual=outcome.actual_size,
                                                   ops=outcome.total_operations))
        body = outcome.as_dict(render=render, max_elements=settings.SHORT_RENDER_LIMIT)
        return func.HttpResponse(json.dumps(body), status_code=200, mimetype="application/json")
    except (MatrixError, ValueError) as e:
        logger.warning(f"multiply_http rejected request: {e}")
        return func.HttpResponse(f"Error: {str(e)}", status_code=400)
    except Exception as e:
        logger.exception("multiply_http failed")
        return func.HttpResponse(f"Error: {str(e)}", status_code=500)
