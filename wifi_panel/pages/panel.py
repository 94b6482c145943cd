from __future__ import annotations

from dataclasses import dataclass

from nicegui import ui

from wifi_panel.common.logging_config import attach_ui_log, detach_ui_log, panel_logger
from wifi_panel.constants import POLL_INTERVAL_S
from wifi_panel.pages.status import StatusPage
from wifi_panel.pages.wifi import ConfirmDialog, WifiPage
from wifi_panel.services.actions import ActionController
from wifi_panel.services.device_client import DeviceClient
from wifi_panel.services.notifications import (
    NiceGuiNotificationView,
    NotificationCenter,
)
from wifi_panel.services.status_poller import StatusPoller
from wifi_panel.state import DeviceState


@dataclass
class Panel:
    """Everything one browser tab owns."""

    panel_id: str
    state: DeviceState
    view: NiceGuiNotificationView
    notifications: NotificationCenter
    poller: StatusPoller
    actions: ActionController
    log_widget: ui.log


def build_activity_log() -> ui.log:
    with ui.expansion("Activity log").classes("w-full"):
        return ui.log(max_lines=200).classes("w-full h-40")


def build_panel(device: DeviceClient, poll_interval: float = POLL_INTERVAL_S) -> Panel:
    """Build the status and credentials cards for the current page and start polling."""
    page_client = ui.context.client
    panel_id = page_client.id
    log = panel_logger(panel_id)

    state = DeviceState()
    view = NiceGuiNotificationView(anchor=ui.element("div"))
    notifications = NotificationCenter(view, log=log)
    poller = StatusPoller(device, state, interval=poll_interval, log=log)
    actions = ActionController(
        device, notifications, confirm=ConfirmDialog().ask, log=log
    )

    with ui.column().classes("w-full max-w-xl mx-auto gap-4 p-4"):
        StatusPage().build(state)
        WifiPage(actions).build()
        log_widget = build_activity_log()

    attach_ui_log(panel_id, log_widget)
    poller.start()

    def _teardown() -> None:
        poller.stop()
        notifications.close()
        detach_ui_log(panel_id)

    # on_disconnect also fires when the browser reconnects (e.g. after the
    # device reboot moves the operator's network); only tear down for good.
    page_client.on_delete(_teardown)

    return Panel(
        panel_id=panel_id,
        state=state,
        view=view,
        notifications=notifications,
        poller=poller,
        actions=actions,
        log_widget=log_widget,
    )
