"""
Logging setup — console + rotating file handler.

Called once from the FastAPI factory.  Modules keep using
``logging.getLogger(__name__)``; this only wires the root logger.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from millops.core.config import settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level:    Overrides ``settings.LOG_LEVEL``.
        log_file: Overrides ``settings.LOG_FILE``.  Empty string disables
                  the file handler.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    path = settings.LOG_FILE if log_file is None else log_file

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # Re-running the factory (tests, reload) must not stack handlers
    for handler in list(root.handlers):
        if getattr(handler, "_millops", False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    console._millops = True
    root.addHandler(console)

    if path:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler._millops = True
        root.addHandler(file_handler)
