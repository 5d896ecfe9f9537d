"""structlog configuration for white-label.

Every log line goes to stderr so that a value printed by ``resolve -q`` or
a spliced file written to stdout stays pipeable. Two renderers:

- console (default), colored when stderr is a terminal
- JSON lines (``--log-json``), one object per event

The configured brand is bound as a context variable, so each event
emitted during a build names the brand it was produced for. Stdlib
records logged with ``extra={...}`` (the resolver's match trace) have
those fields lifted into the event as well.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "white_label"


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def bind_brand(brand: str | None) -> None:
    """Replace the logging context with the brand being built (if any)."""
    structlog.contextvars.clear_contextvars()
    if brand is not None:
        structlog.contextvars.bind_contextvars(brand=brand)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    brand: str | None = None,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: ``white_label`` loggers emit DEBUG (the resolver's match
            trace). Otherwise only warnings, such as a ``brand`` key
            ignored in the manifest, are shown.
        log_json: Render JSON lines instead of console output.
        brand: Brand bound into every event; None binds nothing.
    """
    shared = _processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[*shared, structlog.stdlib.ExtraAdder()],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

    bind_brand(brand)
