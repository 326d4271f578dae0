import io
import time

import azure.functions as func
import numpy as np

from fastmatmul import Matrix, MatrixError, Strategy, multiply, next_pow2, settings
from fastmatmul.logs import get_logger, jlog
from fastmatmul.storage import blob_service, upload_npy


def run_id_for(blob_name: str) -> str:
    base = blob_name.split("/")[-1]
    return base[:-4] if base.lower().endswith(".npz") else base


def load_pair(data: bytes):
    """Read A, B and the optional strategy id from an .npz payload."""
    # Safe: npz is non-pickled by default
    npz = np.load(io.BytesIO(data))
    if not ("A" in npz and "B" in npz):
        raise ValueError("NPZ missing keys 'A' and 'B'")
    strategy = str(npz["strategy"]) if "strategy" in npz else settings.DEFAULT_STRATEGY
    return Matrix.from_grid(npz["A"]), Matrix.from_grid(npz["B"]), Strategy.parse(strategy)


def main(inputBlob: func.InputStream):
    logger = get_logger("router")
    name = inputBlob.name  # e.g., inputs/pair_....npz
    logger.info(f"Triggered by blob: {name} size={inputBlob.length} bytes")

    if not name.lower().endswith(".npz"):
        logger.error("Expected .npz with keys A,B")
        return

    run_id = run_id_for(name)
    try:
        A, B, strategy = load_pair(inputBlob.read())
        outcome = multiply(A, B, strategy, logger=logger)
    except (MatrixError, ValueError) as e:
        logger.error(f"Rejected {name}: {e}")
        jlog({"run_id": run_id, "op": "router", "success": False, "error": str(e)}, logger_name="router")
        return

    N = A.rows
    P = next_pow2(N)
    logger.info(
        f"N={N}, strategy={strategy.value}, actual={outcome.actual_size}, "
        f"pad_ratio={P / float(N):.3f} (P={P}), ops={outcome.total_operations}"
    )

    out_cc = blob_service().get_container_client(settings.OUTPUT_CONTAINER)
    out_blob = f"C_{A.rows}x{B.columns}_{strategy.value}_{int(time.time())}.npy"
    upload_npy(out_cc, out_blob, outcome.result.to_numpy())

    jlog({
        "run_id": run_id,
        "op": "router",
        "mode": "inline",
        "N": N,
        "strategy": strategy.value,
        "actual_size": outcome.actual_size,
        "multiplications": outcome.multiplications,
        "additions": outcome.additions,
        "compute_ms": round(outcome.elapsed_ms, 3),
        "output": f"{settings.OUTPUT_CONTAINER}/{out_blob}",
    }, logger_name="router")
