from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from nicegui import ui

from wifi_panel.common.logging_config import PANEL_LOGGER, TRACE
from wifi_panel.constants import POLL_INTERVAL_S
from wifi_panel.services.device_client import Failure
from wifi_panel.state import PLACEHOLDER, DeviceState, Mode, StatusSnapshot

if TYPE_CHECKING:
    from wifi_panel.services.device_client import DeviceClient, Result


def render_status(snapshot: StatusSnapshot, state: DeviceState) -> None:
    """Replace every rendered status field with the values of ``snapshot``."""
    if snapshot.connected:
        state.status_text = "Connected"
        state.indicator = "connected"
    else:
        state.status_text = "Disconnected"
        state.indicator = "disconnected"

    state.mode_label = "Access Point" if snapshot.mode is Mode.AP else "Station"
    state.ip = snapshot.ip
    state.ssid = snapshot.ssid or PLACEHOLDER
    # 0 dBm is not a real reading; treat it like a missing value
    state.rssi = f"{snapshot.rssi} dBm" if snapshot.rssi else PLACEHOLDER
    state.last_update_ts = time.time()


class StatusPoller:
    """Periodically fetch /status and render it into a DeviceState."""

    def __init__(
        self,
        client: DeviceClient,
        state: DeviceState,
        interval: float = POLL_INTERVAL_S,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.client = client
        self.log = log or logging.getLogger(PANEL_LOGGER)
        self.state = state
        self.interval = interval
        self.timer: ui.timer | None = None
        # Sequence numbers of the last poll issued / last poll rendered
        self.issued = 0
        self.applied = 0

    async def poll(self) -> Result:
        self.issued += 1
        seq = self.issued
        result = await self.client.fetch_status()

        if isinstance(result, Failure):
            # Silent to the operator: this recurs every few seconds while the device reboots
            self.log.warning("Error fetching status: %s", result)
            return result

        if seq < self.applied:
            self.log.debug(
                "Discarding stale status #%d (already rendered #%d)", seq, self.applied
            )
            return result

        self.applied = seq
        render_status(result.value, self.state)
        self.log.log(TRACE, "Status #%d rendered: %s", seq, result.value)
        return result

    def start(self) -> ui.timer:
        """Poll now, then every ``interval`` seconds for the life of the page."""
        if self.timer is None:
            self.timer = ui.timer(self.interval, self.poll, immediate=True)
        else:
            self.timer.active = True
        return self.timer

    def stop(self) -> None:
        if self.timer is not None and not self.timer.is_deleted:
            self.timer.active = False
