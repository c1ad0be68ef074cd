"""
Logging setup shared by the application and the uvicorn server.

``setup_logging`` attaches this service's handlers to the root logger
and makes uvicorn's loggers propagate to them, so request access lines,
server errors and application messages come out in one format and in
one optional log file.  ``run.py`` starts uvicorn with
``log_config=None`` so that uvicorn does not install its own handlers
over these.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Names given to the handlers installed here, used to detect a previous call.
CONSOLE_HANDLER = "customer_api.console"
FILE_HANDLER = "customer_api.file"


def resolve_level(level: str, debug: bool = False) -> int:
    """Return the numeric level for ``level``; ``debug`` forces DEBUG."""
    if debug:
        return logging.DEBUG
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def route_uvicorn_logs() -> None:
    """Drop uvicorn's own handlers and let its records reach the root logger."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure logging for the service.

    Parameters
    ----------
    level : str
        Level name such as ``"INFO"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.
    debug : bool
        Log at DEBUG regardless of ``level`` (``settings.debug``).

    Calling it again updates the level but does not add handlers twice.
    """
    root = logging.getLogger()
    root.setLevel(resolve_level(level, debug))
    route_uvicorn_logs()

    installed = {handler.get_name() for handler in root.handlers}
    if CONSOLE_HANDLER in installed:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    handlers[0].set_name(CONSOLE_HANDLER)
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
