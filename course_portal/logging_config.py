"""Process-wide logging setup for the server and CLI commands."""

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def logging_configure(level: str = "INFO") -> None:
    """Install a single stderr handler for the `course_portal` logger tree.

    uvicorn keeps its own handlers; only project loggers are configured here.

    Args:
        level: Log level name such as `INFO` or `DEBUG`.
    """

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "course_portal": {
                    "handlers": ["stderr"],
                    "level": level.upper(),
                    "propagate": False,
                },
            },
        }
    )
