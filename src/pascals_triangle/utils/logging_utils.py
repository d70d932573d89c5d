import logging
import sys
import time
from pathlib import Path
from typing import Optional
from datetime import datetime

from tqdm import tqdm

# Default log directory
DEFAULT_LOG_DIR = Path("var/log")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class TqdmLoggingHandler(logging.StreamHandler):
    """
    Console handler that routes records through `tqdm.write`.

    Writing through tqdm keeps an active progress bar (e.g. the one shown by
    the collision search) intact instead of tearing it with interleaved lines.
    """
    def __init__(self, stream=None):
        super().__init__(stream if stream is not None else sys.stdout)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def get_log_file_path(
        module_name: str,
        log_dir: Optional[Path] = None,
        include_timestamp: bool = True
) -> Path:
    """
    Generates a file path for a log file and ensures its directory exists.

    Parameters
    ----------
    module_name : str
        The name of the module or logger (e.g., "pascals_triangle.analysis.singmaster").
    log_dir : Optional[Path], optional
        The directory where the log file will be saved. Defaults to `DEFAULT_LOG_DIR`.
    include_timestamp : bool, optional
        If True, a timestamp is added to the filename, by default True.

    Returns
    -------
    Path
        The full path of the log file.
    """
    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR

    log_dir.mkdir(parents=True, exist_ok=True)

    # Dots are not welcome in log file names.
    safe_name = module_name.replace(".", "_")

    if include_timestamp:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{safe_name}_{timestamp}.log"
    else:
        filename = f"{safe_name}.log"

    return log_dir / filename


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = True,
    enable_tqdm: bool = True,
    console_level: Optional[int] = None,
    file_level: Optional[int] = None,
) -> logging.Logger:
    """
    Configures and returns a logger with a console handler and an optional file handler.

    Any handlers already attached to the logger are removed first so that
    repeated calls do not duplicate output.

    Parameters
    ----------
    name : str
        The name of the logger, typically `__name__`.
    level : int, optional
        Base level for the logger and its handlers, by default `logging.INFO`.
    log_file : Optional[str], optional
        Explicit log file path; overrides the generated path.
    log_dir : Optional[Path], optional
        Directory for the generated log file. Defaults to `DEFAULT_LOG_DIR`.
    enable_file_logging : bool, optional
        Create a timestamped log file when `log_file` is not given, by default True.
    enable_tqdm : bool, optional
        Route console output through `tqdm.write`, by default True.
    console_level : Optional[int], optional
        Override for the console handler level.
    file_level : Optional[int], optional
        Override for the file handler level.

    Returns
    -------
    logging.Logger
        The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if enable_tqdm:
        console_handler = TqdmLoggingHandler(sys.stdout)
    else:
        console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(console_level if console_level is not None else level)
    logger.addHandler(console_handler)

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='a')
    elif enable_file_logging:
        log_path = get_log_file_path(name, log_dir=log_dir, include_timestamp=True)
        file_handler = logging.FileHandler(log_path, mode='a')
        logger.info(f"Logging to file: {log_path}")

    if file_handler:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(file_level if file_level is not None else level)
        logger.addHandler(file_handler)

    return logger


def set_log_level(logger: logging.Logger, level: int) -> None:
    """Updates the level of a logger and all of its handlers."""
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def cleanup_old_logs(log_dir: Optional[Path] = None, days_to_keep: int = 7) -> int:
    """
    Removes `*.log` files older than `days_to_keep` days.

    Returns
    -------
    int
        The number of files removed.
    """
    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR

    if not log_dir.exists():
        return 0

    cutoff_time = time.time() - (days_to_keep * 86400)

    removed = 0
    for log_file in log_dir.glob("*.log"):
        if log_file.stat().st_mtime < cutoff_time:
            log_file.unlink()
            removed += 1
    return removed
