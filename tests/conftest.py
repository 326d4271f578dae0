from unittest.mock import MagicMock

import pytest

import fastmatmul.logs


@pytest.fixture(autouse=True)
def run_log_blob(monkeypatch):
    """Keep jlog away from real Blob Storage; returns the append mock."""
    appended = MagicMock()
    monkeypatch.setattr(fastmatmul.logs, "blob_service", MagicMock())
    monkeypatch.setattr(fastmatmul.logs, "append_blob_line", appended)
    return appended
