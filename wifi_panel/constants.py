from __future__ import annotations

import logging
import os

# Device target (what the panel talks to). 192.168.4.1 is the usual AP-mode gateway.
DEVICE_URL: str = os.getenv("WIFI_PANEL_DEVICE_URL", "http://192.168.4.1")
POLL_INTERVAL_S: float = float(os.getenv("WIFI_PANEL_POLL_INTERVAL_S", "3.0"))
# Keep below the poll interval so a hung request never spans two ticks
HTTP_TIMEOUT_S: float = float(os.getenv("WIFI_PANEL_HTTP_TIMEOUT_S", "2.5"))

# Webserver bind (NiceGUI host/port)
SERVER_HOST: str = os.getenv("WIFI_PANEL_SERVER_IP", "0.0.0.0")
SERVER_PORT: int = int(os.getenv("WIFI_PANEL_SERVER_PORT", "8080"))

THEME_MODE: str = os.getenv("WIFI_PANEL_THEME", "system").strip().lower()

# Notification lifecycle (seconds)
NOTIFY_SHOW_DELAY_S: float = 0.010
NOTIFY_DISPLAY_S: float = 3.0
NOTIFY_FADE_S: float = 0.3


def _resolve_log_level() -> int:
    s = os.getenv("WIFI_PANEL_LOG_LEVEL")
    if s:
        name = s.strip().upper()
        mapping = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return mapping.get(name, logging.WARNING)
    else:
        return logging.WARNING


LOG_LEVEL: int = _resolve_log_level()
