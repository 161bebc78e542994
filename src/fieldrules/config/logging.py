"""Logging setup: stdlib loggers rendered by structlog.

Library modules log through ``logging.getLogger(__name__)``; this module
decides how those records look.  Rule failures are DEBUG, malformed rule
parameters and plugin problems are WARNING.

Output goes to stderr so that ``--json`` results on stdout stay parseable.
``--log-json`` switches the renderer to one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "fieldrules"

# Third-party loggers that stay at WARNING even under --verbose.
_QUIET_LIBRARIES = ("phonenumbers",)


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_chain(log_json: bool) -> list[structlog.types.Processor]:
    chain: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        # Plugin load failures carry exc_info; keep tracebacks inside the JSON line.
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return chain


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route every log record through a single structlog-formatted stderr handler.

    Args:
        verbose: Show fieldrules DEBUG records (each failed rule).
            Otherwise only WARNING and above.
        log_json: Render JSON lines instead of the console format.

    Calling this again replaces the previous handler.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=_final_chain(log_json),
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
