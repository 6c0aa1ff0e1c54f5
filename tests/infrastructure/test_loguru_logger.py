# tests/infrastructure/test_loguru_logger.py
from __future__ import annotations

from loguru import logger

from infrastructure.logging.loguru_logger import LoguruLogger


def test_loguru_logger_forwards_event_and_bound_fields() -> None:
    # Arrange
    records = []
    sink_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")

    try:
        # Act
        LoguruLogger().bind(step_id="s1").info("step.start", refreshToken="secret")
    finally:
        logger.remove(sink_id)

    # Assert
    assert len(records) == 1
    record = records[0]
    assert record["level"].name == "INFO"
    assert record["extra"]["event"] == "step.start"
    assert record["extra"]["step_id"] == "s1"
    assert record["extra"]["refreshToken"] == "********"
    assert record["message"].startswith("step.start ")
