import json
import os

from loguru import logger

from genetic.utils import setup_logger


def read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


def test_setup_logger_writes_file(tmp_path):
    log_dir = tmp_path / "logs"
    log_file = setup_logger(log_dir=log_dir, level="DEBUG", enable_colors=False)

    logger.info("[Test] hello {}", "world")
    logger.remove()

    assert os.path.dirname(log_file) == str(log_dir)
    assert os.path.basename(log_file).startswith("genetic_")
    contents = read(log_file)
    assert "[Test] hello world" in contents
    assert "[Logger] Writing DEBUG logs" in contents


def test_setup_logger_respects_level(tmp_path):
    log_file = setup_logger(log_dir=str(tmp_path), level="WARNING", enable_colors=False)

    logger.info("[Test] hidden")
    logger.warning("[Test] shown")
    logger.remove()

    contents = read(log_file)
    assert "[Test] shown" in contents
    assert "[Test] hidden" not in contents


def test_setup_logger_serialized_run(tmp_path):
    log_file = setup_logger(
        log_dir=tmp_path, enable_colors=False, run_name="tsp", serialize=True
    )

    logger.info("[Test] structured")
    logger.remove()

    assert os.path.basename(log_file).startswith("tsp_")
    messages = [
        json.loads(line)["record"]["message"] for line in read(log_file).splitlines()
    ]
    assert "[Test] structured" in messages
