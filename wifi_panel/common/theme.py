from __future__ import annotations

import logging
from typing import Literal, cast, get_args

from nicegui import ui

from wifi_panel.constants import NOTIFY_FADE_S

ThemeMode = Literal["light", "dark", "system"]


def resolve_theme(value: str | None) -> ThemeMode:
    """Map a configured string onto a ThemeMode, defaulting to 'system'."""
    mode = (value or "").strip().lower()
    if mode in get_args(ThemeMode):
        return cast("ThemeMode", mode)
    if mode:
        logging.warning("Unknown theme %r, using 'system'", value)
    return "system"


def get_palette(mode: ThemeMode) -> dict[str, str]:
    """Return palette tokens for the given mode."""
    if mode == "dark":
        return {
            "primary": "#1F538D",
            "primary_hover": "#14375E",
            "background": "#1A1A1A",
            "surface": "#212121",
            "text": "#D6D6D6",
            "muted": "#949A9F",
            "accent": "#22D3EE",
            "positive": "#21BA45",
            "negative": "#DB2828",
            "info": "#31CCEC",
            "warning": "#F2C037",
        }
    # light
    return {
        "primary": "#3B8ED0",
        "primary_hover": "#36719F",
        "background": "#EBEBEB",
        "surface": "#DBDBDB",
        "text": "#1A1A1A",
        "muted": "#A6A6A6",
        "accent": "#22D3EE",
        "positive": "#21BA45",
        "negative": "#DB2828",
        "info": "#31CCEC",
        "warning": "#F2C037",
    }


def _inject_css_vars(p: dict[str, str], selector: str = ":root") -> None:
    """Inject CSS variables under ``selector``."""
    ui.add_css(
        f"""
{selector} {{
  --panel-primary: {p["primary"]};
  --panel-bg: {p["background"]};
  --panel-surface: {p["surface"]};
  --panel-text: {p["text"]};
  --panel-muted: {p["muted"]};
  --panel-positive: {p["positive"]};
  --panel-negative: {p["negative"]};
}}
"""
    )


def inject_panel_css() -> None:
    """Surfaces, status dot and notification styles."""
    fade_ms = int(NOTIFY_FADE_S * 1000)
    ui.add_css(
        f"""
body, .q-page {{ background: var(--panel-bg); color: var(--panel-text); }}
.q-header, .q-card {{ background: var(--panel-surface); color: var(--panel-text); }}

.status-dot {{ display: inline-block; width: 12px; height: 12px; border-radius: 50%; }}
.status-dot.connected {{ background: var(--panel-positive); box-shadow: 0 0 6px var(--panel-positive); }}
.status-dot.disconnected {{ background: var(--panel-negative); }}

.notification-container {{
  position: fixed; top: 16px; right: 16px; z-index: 9999;
  display: flex; flex-direction: column; gap: 8px; pointer-events: none;
}}
.notification {{
  min-width: 240px; padding: 10px 14px; border-radius: 6px; color: #FFFFFF;
  opacity: 0; transform: translateX(24px);
  transition: opacity {fade_ms}ms ease, transform {fade_ms}ms ease;
}}
.notification.notification-show {{ opacity: 1; transform: translateX(0); }}
.notification-success {{ background: var(--panel-positive); }}
.notification-error {{ background: var(--panel-negative); }}
"""
    )


def apply_theme(mode: ThemeMode) -> ui.dark_mode:
    """
    Apply the selected theme:
    - Set NiceGUI/Quasar colors and dark mode.
    - Inject CSS variables and the panel styles.
    'system' leaves dark mode on auto so the browser's preference decides;
    both palettes are injected and Quasar's body--dark class picks one.
    """
    light = get_palette("light")
    pal = get_palette("dark") if mode == "dark" else light

    ui.colors(
        primary=pal["primary"],
        secondary=pal["primary_hover"],
        accent=pal["accent"],
        positive=pal["positive"],
        negative=pal["negative"],
        info=pal["info"],
        warning=pal["warning"],
    )

    if mode == "system":
        dark = ui.dark_mode(None)
        _inject_css_vars(light)
        _inject_css_vars(get_palette("dark"), selector="body.body--dark")
    else:
        dark = ui.dark_mode(mode == "dark")
        _inject_css_vars(pal)

    inject_panel_css()
    return dark
