"""loguru sinks for engine runs: stderr plus one rotating file per run."""

from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    log_dir: str | Path = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
    run_name: str = "genetic",
    serialize: bool = False,
) -> str:
    """
    Route loguru output to stderr and to ``<log_dir>/<run_name>_<timestamp>.log``.

    Existing sinks are removed first, so repeated calls do not duplicate output.

    Args:
        log_dir: Directory for log files, created if missing
        level: Minimum level for both sinks
        rotation: File rotation policy (e.g., "50 MB", "1 day")
        retention: How long rotated files are kept (e.g., "30 days")
        enable_colors: Colorize the console sink when stderr is a terminal
        run_name: Prefix of the log file name
        serialize: Write the file sink as one JSON record per line

    Returns:
        Path to the run's log file
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = directory / f"{run_name}_{timestamp}.log"

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=enable_colors and sys.stderr.isatty(),
    )
    logger.add(
        str(log_file),
        level=level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
        serialize=serialize,
    )

    logger.info("[Logger] Writing {} logs to {}", level, log_file)
    return str(log_file)
