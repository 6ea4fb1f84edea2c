"""structlog configuration shared by the API and the scripts."""

import logging

import structlog


def configure_logging(level: str = "info", json_logs: bool = False) -> None:
    """Configure structlog for the process.

    Events below ``level`` are dropped by the bound logger itself, so
    filtered calls cost almost nothing. ``json_logs`` switches the
    console renderer for one JSON object per line.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
