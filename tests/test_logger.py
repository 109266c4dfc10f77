from data_utilities import logger as logger_module
from data_utilities.logger import CustomLoggerAdapter, console_log, get_logger, log


def test_log_writes_stderr_and_file(log_file, capsys):
    log("Loaded 3 rows", level="warning")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Loaded 3 rows" in captured.err
    assert log_file.read_text(encoding="utf-8").strip().endswith("WARNING Loaded 3 rows")


def test_console_log_skips_file(log_file, capsys):
    console_log("only on screen", level="error")

    assert "only on screen" in capsys.readouterr().err
    assert not log_file.exists()


def test_console_level_filters_stderr_only(log_file, capsys, monkeypatch):
    monkeypatch.setattr(logger_module, "CONSOLE_LEVEL", "warning")

    log("quiet", level="info")
    log("loud", level="error")

    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "loud" in err
    assert "INFO quiet" in log_file.read_text(encoding="utf-8")


def test_unknown_level_keeps_its_name(log_file):
    log("plain", level="trace")
    assert "TRACE plain" in log_file.read_text(encoding="utf-8")


def test_adapter_levels():
    calls = []
    adapter = CustomLoggerAdapter(lambda message, level: calls.append((level, message)))

    adapter.info("i")
    adapter.warning("w")
    adapter.error("e")

    assert calls == [("info", "i"), ("warning", "w"), ("error", "e")]


def test_get_logger_follows_module_log(monkeypatch):
    calls = []
    monkeypatch.setattr(logger_module, "log", lambda message, level: calls.append(level))

    get_logger().error("boom")

    assert calls == ["error"]
