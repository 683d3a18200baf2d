"""
Logging helpers for files-manager-lib.

Every module grabs a named structlog logger at import time:

    from files_manager_lib.log import get_logger

    LOGGER = get_logger("files_manager_lib.clients.redis")

The library never configures logging on import. Host processes that want output
call ``configure_logging()`` once at startup (or configure structlog themselves).
"""

import logging
import sys

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Route structlog through the standard library root logger.

    Args:
    ----
        level: Root log level name (e.g. "DEBUG", "INFO")
        json_logs: Render JSON lines instead of the pretty console renderer

    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ]
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Driver monitor threads are chatty at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
