from __future__ import annotations

import logging
import sys

from nicegui import ui

_LEVEL_COLORS = {
    "TRACE": "\033[32m",  # green
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[37m",  # light gray
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[41m",  # red background
}
_RESET = "\033[0m"
_DIM = "\033[2m"

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
UI_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Below DEBUG: one line per status poll
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

PANEL_LOGGER = "wifi_panel"


class AnsiColorFormatter(logging.Formatter):
    """Dim the timestamp and color the level name when stderr is a TTY."""

    def __init__(self, colored: bool = True) -> None:
        super().__init__(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT)
        self.colored = colored and sys.stderr.isatty()

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = super().formatTime(record, datefmt)
        return f"{_DIM}{stamp}{_RESET}" if self.colored else stamp

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelname, "") if self.colored else ""
        if not color:
            return super().format(record)
        plain = record.levelname
        record.levelname = f"{color}{plain}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


# ---- Per-panel activity log ----

# panel id (NiceGUI client id) -> that page's ui.log
_panel_logs: dict[str, ui.log] = {}


def panel_logger(panel_id: str) -> logging.LoggerAdapter:
    """Logger whose records also reach the activity log of one panel only."""
    return logging.LoggerAdapter(
        logging.getLogger(PANEL_LOGGER), {"panel_id": panel_id}
    )


class NiceGuiLogHandler(logging.Handler):
    """Route records tagged with a panel id into that panel's ui.log."""

    def __init__(self, level: int = logging.INFO) -> None:
        super().__init__(level=level)
        self.setFormatter(logging.Formatter(UI_FORMAT, DATE_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        widget = _panel_logs.get(getattr(record, "panel_id", None))
        if widget is None:
            return
        try:
            widget.push(self.format(record))
        except Exception:
            self.handleError(record)


def attach_ui_log(panel_id: str, log_widget: ui.log) -> None:
    _panel_logs[panel_id] = log_widget


def detach_ui_log(panel_id: str) -> None:
    _panel_logs.pop(panel_id, None)


def configure_logging(
    level: int = logging.INFO, use_color: bool = True, add_ui_handler: bool = True
) -> logging.Logger:
    """
    Configure the root logger with a colored stderr handler and, optionally,
    the handler feeding each page's activity log. Handlers are added once.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    if not any(isinstance(h.formatter, AnsiColorFormatter) for h in logger.handlers):
        console = logging.StreamHandler(stream=sys.stderr)
        console.setLevel(level)
        console.setFormatter(AnsiColorFormatter(colored=use_color))
        logger.addHandler(console)

    if add_ui_handler and not any(
        isinstance(h, NiceGuiLogHandler) for h in logger.handlers
    ):
        # The activity log is for the operator; keep poll chatter out of it
        logger.addHandler(NiceGuiLogHandler(level=max(level, logging.INFO)))

    return logger
