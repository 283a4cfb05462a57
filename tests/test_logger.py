import io

import orjson
import pytest
import structlog

from sfcplay.log.logger import DEFAULT_MAX_BYTES, _parse_rotation, configure


@pytest.fixture
def restore_logging():
    yield
    configure(log_level="CRITICAL", cache=False)


@pytest.mark.parametrize(
    ("rotation", "expected"),
    [(None, DEFAULT_MAX_BYTES), ("5 MB", 5 * 1024 * 1024), ("1 GB", DEFAULT_MAX_BYTES), ("x MB", DEFAULT_MAX_BYTES)],
)
def test_parse_rotation(rotation, expected):
    assert _parse_rotation(rotation) == expected


@pytest.mark.usefixtures("restore_logging")
def test_container_env_renders_json(monkeypatch):
    monkeypatch.setenv("SFCPLAY_LOG_ENV", "container")
    output = io.StringIO()

    configure(log_level="DEBUG", cache=False, output_file=output)
    structlog.get_logger().info("compiled", warnings=1)

    lines = [orjson.loads(line) for line in output.getvalue().splitlines()]
    compiled = next(line for line in lines if line["event"] == "compiled")
    assert compiled["level"] == "info"
    assert compiled["warnings"] == 1


@pytest.mark.usefixtures("restore_logging")
def test_level_from_environment_filters_records(monkeypatch):
    monkeypatch.setenv("SFCPLAY_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("SFCPLAY_LOG_ENV", "container")
    output = io.StringIO()

    configure(cache=False, output_file=output)
    structlog.get_logger().info("hidden")
    structlog.get_logger().error("shown")

    assert "hidden" not in output.getvalue()
    assert "shown" in output.getvalue()
