import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# module loggers live at the top level, so configure the root logger
_configured_handler = None


def configure_logging(cfg) -> logging.Handler | None:
    """Send log records to the configured file.

    curses owns stdout/stderr while the app runs, so nothing is logged to
    the terminal. Returns the installed handler, or None when the log file
    could not be opened.
    """
    global _configured_handler

    root = logging.getLogger()
    if _configured_handler is not None:
        root.removeHandler(_configured_handler)
        _configured_handler.close()
        _configured_handler = None

    path = cfg.get("LOG_FILE")
    if not path:
        return None
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, cfg.get("LOG_LEVEL", "WARNING"), logging.WARNING))
    _configured_handler = handler
    return handler
