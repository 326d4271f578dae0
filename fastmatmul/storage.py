import io
import os

import numpy as np
from azure.core.exceptions import ResourceExistsError
from azure.storage.blob import BlobServiceClient, ContentSettings

NPY_TYPE  = "application/octet-stream"
TEXT_TYPE = "text/plain; charset=utf-8"


def blob_service():
    return BlobServiceClient.from_connection_string(os.environ["AzureWebJobsStorage"])


def _put(bc, data: bytes, content_type: str) -> int:
    """Overwrite one blob; returns the bytes written."""
    bc.upload_blob(data, overwrite=True, content_settings=ContentSettings(content_type=content_type))
    return len(data)


def upload_npy(cc, name: str, arr: np.ndarray) -> int:
    buf = io.BytesIO()
    np.save(buf, arr, allow_pickle=False)
    return _put(cc.get_blob_client(name), buf.getvalue(), NPY_TYPE)


def upload_text(container: str, name: str, text: str) -> int:
    bc = blob_service().get_blob_client(container=container, blob=name)
    return _put(bc, text.encode("utf-8"), TEXT_TYPE)


def append_blob_line(cc, name: str, text: str):
    """Append text as one line of an AppendBlob that may not exist yet."""
    bc = cc.get_blob_client(name)
    if not bc.exists():
        try:
            bc.create_append_blob()
        except ResourceExistsError:
            pass  # created concurrently by another run
    bc.append_block(f"{text}\n".encode("utf-8"))
