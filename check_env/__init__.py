import json, sys
import azure.functions as func

import fastmatmul
from fastmatmul import Strategy, settings


def main(req: func.HttpRequest) -> func.HttpResponse:
    try:
        import numpy as np
        payload = {
            "ok": True,
            "python": sys.version,
            "numpy_version": np.__version__,
            "fastmatmul_version": fastmatmul.__version__,
            "strategies": [s.value for s in Strategy],
            "strassen_cutover": settings.STRASSEN_CUTOVER,
            "winograd_cutover": settings.WINOGRAD_CUTOVER,
        }
        return func.HttpResponse(json.dumps(payload), mimetype="application/json")
    except Exception as e:
        return func.HttpResponse(
            json.dumps({"ok": False, "error": repr(e)}),
            status_code=500,
            mimetype="application/json",
        )
