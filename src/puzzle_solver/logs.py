import logging
import sys

import structlog


def _stderr_logger(*args):
    # Resolve sys.stderr per logger so redirected streams are honored.
    return structlog.PrintLogger(sys.stderr)


def configure_logging(verbose: bool = False, json: bool = False) -> None:
    """Configure structlog for the CLI. Logs go to stderr so stdout stays clean."""
    level = logging.DEBUG if verbose else logging.INFO
    renderer = structlog.processors.JSONRenderer(indent=2) if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
