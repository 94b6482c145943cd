import argparse
import logging
import sys

from nicegui import app as ng_app
from nicegui import ui

from wifi_panel.common.logging_config import TRACE, configure_logging
from wifi_panel.common.theme import apply_theme, resolve_theme
from wifi_panel.constants import (
    DEVICE_URL,
    LOG_LEVEL,
    POLL_INTERVAL_S,
    SERVER_HOST,
    SERVER_PORT,
    THEME_MODE,
)
from wifi_panel.pages.panel import build_panel
from wifi_panel.services.device_client import client

# Runtime configuration (resolved later from CLI/env)
RUNTIME_POLL_INTERVAL_S = POLL_INTERVAL_S


def build_header() -> None:
    with ui.header().classes("items-center justify-between px-4 py-2"):
        ui.label("WiFi Setup").classes("text-lg font-medium")
        ui.label(client.base_url).classes("text-xs")


@ui.page("/")
async def index() -> None:
    apply_theme(resolve_theme(THEME_MODE))
    build_header()

    # Per-page state: each browser tab gets its own poller and notifications
    build_panel(client, poll_interval=RUNTIME_POLL_INTERVAL_S)


ng_app.on_shutdown(client.aclose)


if __name__ in {"__main__", "__mp_main__"}:
    # CLI: web bind, device target, and log level
    parser = argparse.ArgumentParser(description="WiFi provisioning panel")
    parser.add_argument("--host", default=SERVER_HOST, help="Webserver bind host")
    parser.add_argument(
        "--port", type=int, default=SERVER_PORT, help="Webserver bind port"
    )
    parser.add_argument(
        "--device-url", default=DEVICE_URL, help="Base URL of the device"
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=POLL_INTERVAL_S,
        help="Seconds between status polls",
    )
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set log level",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only WARNING and above"
    )
    args, _ = parser.parse_known_args()

    client.base_url = args.device_url
    RUNTIME_POLL_INTERVAL_S = max(0.1, float(args.poll_interval))

    # Priority: explicit --log-level > -v/-q > env default from constants
    if args.log_level:
        if args.log_level == "TRACE":
            RUNTIME_LOG_LEVEL = TRACE
        else:
            RUNTIME_LOG_LEVEL = getattr(logging, args.log_level)
    elif args.verbose >= 3:
        RUNTIME_LOG_LEVEL = TRACE
    elif args.verbose >= 2:
        RUNTIME_LOG_LEVEL = logging.DEBUG
    elif args.verbose == 1:
        RUNTIME_LOG_LEVEL = logging.INFO
    elif args.quiet:
        RUNTIME_LOG_LEVEL = logging.WARNING
    else:
        RUNTIME_LOG_LEVEL = LOG_LEVEL

    configure_logging(RUNTIME_LOG_LEVEL)
    logging.info("Webserver bind: host=%s port=%s", args.host, args.port)
    logging.info(
        "Device target: %s (poll every %.1fs)", client.base_url, RUNTIME_POLL_INTERVAL_S
    )

    ui.run(
        title="WiFi Setup",
        host=args.host,
        port=int(args.port),
        reload=False,
        show=False,
        loop="uvloop" if sys.platform != "win32" else "asyncio",
        http="httptools",
        ws="wsproto",
    )
