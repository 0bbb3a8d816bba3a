"""Logging configuration for the econet24 client."""

import logging

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("econet24")

# urllib3 connection log, attached to the CLI handler only in debug mode
_WIRE_LOGGER = "urllib3"

_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def _build_handler() -> logging.Handler:
    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + _FMT.replace(" %(name)s", "%(reset)s %(name)s"),
            datefmt=_DATEFMT,
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FMT, datefmt=_DATEFMT))
    return handler


def setup_logging(debug: bool = False) -> None:
    """
    Send the ``econet24`` logger to stderr.

    With *debug* the package logs every service URL and the captured CSRF
    token, and urllib3's connection log is routed to the same handler.
    Passwords are never logged.
    """
    handler = _build_handler()

    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers.clear()
    log.addHandler(handler)
    log.propagate = False

    wire = logging.getLogger(_WIRE_LOGGER)
    wire.handlers.clear()
    if debug:
        wire.setLevel(logging.DEBUG)
        wire.addHandler(handler)
        wire.propagate = False
    else:
        wire.setLevel(logging.WARNING)
        wire.propagate = True
