import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

# timestamp, level, module, function and line
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'

_logging_initialized = False


def resolve_level(name: Optional[str]) -> int:
    """
    map a level name ("debug", "INFO", ...) to its logging constant.
    unknown names fall back to INFO
    """
    level = logging.getLevelName((name or DEFAULT_LEVEL).upper())
    if not isinstance(level, int):
        logging.getLogger(__name__).warning(
            "unknown log level %r, using %s", name, DEFAULT_LEVEL)
        return logging.INFO
    return level


def setup_logging(level: Optional[str] = None, force: bool = False):
    """
    configure the root logger once, console output only.
    level defaults to $TICTACTOE_LOG_LEVEL, then INFO
    """
    global _logging_initialized
    if _logging_initialized and not force:
        return
    logging.basicConfig(
        level=resolve_level(level or os.environ.get(LOG_LEVEL_ENV)),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=force,
    )
    _logging_initialized = True


def get_logger(module_name: str) -> logging.Logger:
    return logging.getLogger(module_name)
