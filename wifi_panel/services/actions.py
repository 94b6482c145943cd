from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from wifi_panel.common.logging_config import PANEL_LOGGER
from wifi_panel.services.device_client import ErrorKind, Failure
from wifi_panel.state import CredentialSubmission, Severity

if TYPE_CHECKING:
    from wifi_panel.services.device_client import DeviceClient, Result
    from wifi_panel.services.notifications import NotificationCenter

CLEAR_CONFIRM_PROMPT = (
    "Are you sure you want to clear credentials? The device will reboot in AP mode."
)


class ActionController:
    """User-initiated changes to the device's WiFi credentials."""

    def __init__(
        self,
        client: DeviceClient,
        notifications: NotificationCenter,
        confirm: Callable[[str], Awaitable[bool]],
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.client = client
        self.log = log or logging.getLogger(PANEL_LOGGER)
        self.notifications = notifications
        self.confirm = confirm

    async def save_credentials(self, ssid: str, password: str = "") -> Result:
        if not ssid:
            self.notifications.notify("Please enter SSID", Severity.ERROR)
            return Failure(ErrorKind.VALIDATION, "empty SSID")

        submission = CredentialSubmission(ssid=ssid, password=password or "")
        result = await self.client.save_credentials(submission)
        if not isinstance(result, Failure):
            self.notifications.notify(
                "Credentials saved! Device will reboot and connect to WiFi.",
                Severity.SUCCESS,
            )
            self.log.info("Saved credentials for SSID %r", ssid)
        elif result.kind is ErrorKind.SERVER_REJECTION:
            self.log.error("Save credentials rejected: %s", result)
            self.notifications.notify("Failed to save credentials", Severity.ERROR)
        else:
            self.log.error("Error saving credentials: %s", result)
            self.notifications.notify("Error saving credentials", Severity.ERROR)
        return result

    async def clear_credentials(self) -> Result | None:
        """Clear stored credentials after confirmation. Returns None if declined."""
        if not await self.confirm(CLEAR_CONFIRM_PROMPT):
            self.log.debug("Clear credentials declined")
            return None

        result = await self.client.clear_credentials()
        if not isinstance(result, Failure):
            self.notifications.notify(
                "Credentials cleared! Device will reboot.", Severity.SUCCESS
            )
            self.log.warning("Credentials cleared; device rebooting into AP mode")
        elif result.kind is ErrorKind.SERVER_REJECTION:
            self.log.error("Clear credentials rejected: %s", result)
            self.notifications.notify("Failed to clear credentials", Severity.ERROR)
        else:
            self.log.error("Error clearing credentials: %s", result)
            self.notifications.notify("Error clearing credentials", Severity.ERROR)
        return result
