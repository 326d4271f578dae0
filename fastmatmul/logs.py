import json
import logging
import os
import time
import uuid

from . import settings
from .storage import append_blob_line, blob_service

_BLAS_THREAD_VARS = ["OMP_NUM_THREADS", "OPENBLAS_NUM_THREADS", "MKL_NUM_THREADS",
                     "NUMEXPR_NUM_THREADS", "VECLIB_MAXIMUM_THREADS"]
_FORMATTER = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")


def cd(**k):  # custom dimensions helper
    return {'custom_dimensions': k}


def get_logger(name: str, level: str = None) -> logging.Logger:
    """Named logger with one console handler; level defaults to LOG_LEVEL."""
    lg = logging.getLogger(name)
    if not any(isinstance(h, logging.StreamHandler) for h in lg.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(_FORMATTER)
        lg.addHandler(handler)
    lg.setLevel(level or settings.LOG_LEVEL)
    # single-threaded BLAS per worker
    for var in _BLAS_THREAD_VARS:
        os.environ.setdefault(var, "1")
    return lg


def new_run_id(prefix: str = "run") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def jlog(rec: dict, logger_name: str = "fastmatmul") -> dict:
    """Emit one structured run record and append it to the run log blob."""
    base = {
        "ts": time.time(),
        "run_id": rec.get("run_id") or new_run_id(),
        "op": rec.get("op", "multiply"),
    }
    base.update(rec)
    base.setdefault("success", True)

    line = json.dumps(base, ensure_ascii=False)
    logging.getLogger(logger_name).info(line)  # App Insights

    try:
        cc = blob_service().get_container_client(settings.RUN_LOG_CONTAINER)
        name = f"{settings.RUN_LOG_PREFIX.rstrip('/')}/run_{base['run_id']}.jsonl"
        append_blob_line(cc, name, line)
    except Exception as e:
        logging.getLogger(logger_name).warning(f"blob-append-log failed: {e}")
    return base
