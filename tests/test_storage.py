"""
Tests for the Blob Storage helpers and logger setup
"""

import io
import logging
import os
from unittest.mock import MagicMock

import numpy as np
import pytest
from azure.core.exceptions import ResourceExistsError

from fastmatmul import logs, storage


class TestUploads:
    def test_upload_npy(self):
        cc = MagicMock()
        arr = np.arange(6, dtype=np.float64).reshape(2, 3)
        written = storage.upload_npy(cc, "run/C.npy", arr)

        cc.get_blob_client.assert_called_once_with("run/C.npy")
        bc = cc.get_blob_client.return_value
        data = bc.upload_blob.call_args.args[0]
        assert written == len(data)
        np.testing.assert_array_equal(np.load(io.BytesIO(data)), arr)
        kwargs = bc.upload_blob.call_args.kwargs
        assert kwargs["overwrite"] is True
        assert kwargs["content_settings"].content_type == storage.NPY_TYPE

    def test_upload_text(self, monkeypatch):
        service = MagicMock()
        monkeypatch.setattr(storage, "blob_service", lambda: service)
        written = storage.upload_text("reports", "r/1.txt", "Größe 2×2")

        service.get_blob_client.assert_called_once_with(container="reports", blob="r/1.txt")
        bc = service.get_blob_client.return_value
        assert bc.upload_blob.call_args.args[0] == "Größe 2×2".encode("utf-8")
        assert written == len("Größe 2×2".encode("utf-8"))
        assert bc.upload_blob.call_args.kwargs["content_settings"].content_type == storage.TEXT_TYPE


class TestAppendBlobLine:
    def test_creates_missing_blob(self):
        cc = MagicMock()
        bc = cc.get_blob_client.return_value
        bc.exists.return_value = False
        storage.append_blob_line(cc, "runs/x.jsonl", '{"a": 1}')
        bc.create_append_blob.assert_called_once_with()
        bc.append_block.assert_called_once_with(b'{"a": 1}\n')

    def test_existing_blob_is_appended(self):
        cc = MagicMock()
        bc = cc.get_blob_client.return_value
        bc.exists.return_value = True
        storage.append_blob_line(cc, "runs/x.jsonl", "line")
        bc.create_append_blob.assert_not_called()
        bc.append_block.assert_called_once_with(b"line\n")

    def test_concurrent_creation_is_tolerated(self):
        cc = MagicMock()
        bc = cc.get_blob_client.return_value
        bc.exists.return_value = False
        bc.create_append_blob.side_effect = ResourceExistsError("exists")
        storage.append_blob_line(cc, "runs/x.jsonl", "line")
        bc.append_block.assert_called_once_with(b"line\n")


class TestGetLogger:
    def test_single_handler(self):
        lg = logs.get_logger("fastmatmul.test.single")
        logs.get_logger("fastmatmul.test.single")
        stream_handlers = [h for h in lg.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].formatter is logs._FORMATTER

    @pytest.mark.parametrize("level,expected", [("DEBUG", logging.DEBUG), ("WARNING", logging.WARNING)])
    def test_explicit_level(self, level, expected):
        assert logs.get_logger("fastmatmul.test.level", level).level == expected

    def test_pins_blas_threads(self, monkeypatch):
        for var in logs._BLAS_THREAD_VARS:
            monkeypatch.delenv(var, raising=False)
        logs.get_logger("fastmatmul.test.blas")
        assert all(os.environ[var] == "1" for var in logs._BLAS_THREAD_VARS)
