"""Logging setup for the typedump CLI.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves.  What they emit:

- ``typedump.engine.registry``: every register/replace/unregister (DEBUG)
- ``typedump.engine.dumper``: values whose ``repr()`` failed and were
  shown as unrepresentable (DEBUG)
- ``typedump.plugins.manager``: plugins found and registered (DEBUG);
  plugins or renderer entries that were skipped (WARNING)

:func:`configure_logging` routes all of it through one structlog
``ProcessorFormatter`` on stderr, so a dump on stdout is never interleaved
with log lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

#: Loggers that stay at WARNING even with ``--verbose``.
QUIET_LOGGERS = ("pluggy",)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set typedump's log levels.

    Calling it again replaces the previous handler.

    Args:
        verbose: Show the DEBUG messages listed above.  Otherwise only
            plugin warnings get through.
        log_json: One JSON object per line instead of the console format.
    """
    processors = _shared_processors()
    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _final_renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("typedump").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
