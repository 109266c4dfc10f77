import pytest

from data_utilities import logger as logger_module


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    """Keep test runs from writing into ./logs"""
    path = tmp_path / "logs" / "test.log"
    monkeypatch.setattr(logger_module, "LOG_FILE", path)
    return path
