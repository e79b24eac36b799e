import logging
from logging.handlers import QueueHandler
from pathlib import Path

import orjson

from funny_rectangles.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    setup_logging,
    shutdown_logging,
)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1, "path": Path("a")},
    )
    payload = orjson.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"custom": 1, "path": "a"}


def test_json_formatter_omits_fields_without_extras() -> None:
    record = logging.makeLogRecord({"msg": "plain", "levelname": "INFO"})
    assert "fields" not in orjson.loads(JsonFormatter().format(record))


def test_build_logging_config_has_no_file_sink_by_default(monkeypatch) -> None:
    monkeypatch.delenv("FUNNY_RECTANGLES_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is None


def test_build_logging_config_places_run_file_under_app_data(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("FUNNY_RECTANGLES_APP_DATA_DIR", str(tmp_path / "appdata"))
    config = build_logging_config()
    assert config.file_path is not None
    path = Path(config.file_path)
    assert path.parent == tmp_path / "appdata" / "logs"
    assert path.name.startswith("funny_rectangles_run_")
    assert not path.parent.exists()


def test_configure_logging_console_only_sets_level() -> None:
    configure_logging(LoggingConfig(level_name="WARNING", console_format="text"))
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], QueueHandler)


def test_setup_logging_writes_json_lines_when_configured(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("FUNNY_RECTANGLES_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    config = setup_logging()

    logging.getLogger("test.logging.file.path").info("hello", extra={"answer": 42})
    shutdown_logging()

    assert not any(isinstance(h, QueueHandler) for h in logging.getLogger().handlers)
    lines = Path(config.file_path).read_text(encoding="utf-8").splitlines()
    records = [orjson.loads(line) for line in lines]
    hello = [r for r in records if r["msg"] == "hello"]
    assert hello and hello[0]["fields"] == {"answer": 42}
