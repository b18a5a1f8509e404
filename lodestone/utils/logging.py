"""File logging for lodestone runs."""

import logging
from datetime import datetime
from pathlib import Path

from lodestone.utils.files import get_logs_path, init_state_dir

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# per-connection chatter from these drowns out the page-level records
NOISY_LOGGERS = ('urllib3', 'charset_normalizer')


class RunLogHandler(logging.FileHandler):
    """File handler for one run's log file; at most one is installed at a time."""


def _resolve_level(level: str) -> int:
    name = level.upper()
    if name == 'ALL':
        return logging.NOTSET
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.DEBUG


def setup_local_logging(level: str = 'DEBUG', logs_dir: Path | None = None) -> Path:
    """Send log records to a fresh run file.

    Calling this again closes the previous run file and starts a new one. The
    CLI writes its own console output through rich, so no console handler is
    added here.

    Args:
        level: Logging level name, or 'ALL'. Defaults to 'DEBUG'.
        logs_dir: Directory for the log file. Defaults to .lodestone/logs.

    Returns:
        Path: The path to the created log file.

    """
    if logs_dir is None:
        init_state_dir()
        logs_dir = get_logs_path()
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_file = logs_dir / f'run_{datetime.now():%Y%m%d_%H%M%S}.log'
    numeric_level = _resolve_level(level)

    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if isinstance(h, RunLogHandler)]:
        root_logger.removeHandler(handler)
        handler.close()

    handler = RunLogHandler(log_file, encoding='utf-8')
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return log_file
