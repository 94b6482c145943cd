from __future__ import annotations

import time

from nicegui import ui

from wifi_panel.state import PLACEHOLDER, DeviceState


def _format_ts(ts: float) -> str:
    if not ts:
        return f"Last update: {PLACEHOLDER}"
    return "Last update: " + time.strftime("%H:%M:%S", time.localtime(ts))


class StatusPage:
    """Device status card."""

    def __init__(self) -> None:
        # Labels bound to DeviceState
        self.status_text_label: ui.label | None = None
        self.mode_label: ui.label | None = None
        self.ip_label: ui.label | None = None
        self.ssid_label: ui.label | None = None
        self.rssi_label: ui.label | None = None

    def build(self, state: DeviceState) -> None:
        with ui.card().classes("w-full"):
            ui.label("Device status").classes("text-md font-medium")
            with ui.row().classes("items-center gap-2"):
                # One dot per state; visibility keeps them mutually exclusive
                ui.element("span").classes("status-dot connected").bind_visibility_from(
                    state, "indicator", value="connected"
                )
                ui.element("span").classes(
                    "status-dot disconnected"
                ).bind_visibility_from(state, "indicator", value="disconnected")
                self.status_text_label = ui.label().bind_text_from(
                    state, "status_text"
                )

            with ui.grid(columns=2).classes("gap-x-6 gap-y-1 text-sm"):
                ui.label("Mode").classes("text-[var(--panel-muted)]")
                self.mode_label = ui.label().bind_text_from(state, "mode_label")
                ui.label("IP address").classes("text-[var(--panel-muted)]")
                self.ip_label = ui.label().bind_text_from(state, "ip")
                ui.label("Current SSID").classes("text-[var(--panel-muted)]")
                self.ssid_label = ui.label().bind_text_from(state, "ssid")
                ui.label("Signal").classes("text-[var(--panel-muted)]")
                self.rssi_label = ui.label().bind_text_from(state, "rssi")

            ui.label().bind_text_from(
                state, "last_update_ts", backward=_format_ts
            ).classes("text-xs text-[var(--panel-muted)]")
