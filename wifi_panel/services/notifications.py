from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from nicegui import ui

from wifi_panel.common.logging_config import PANEL_LOGGER
from wifi_panel.constants import NOTIFY_DISPLAY_S, NOTIFY_FADE_S, NOTIFY_SHOW_DELAY_S
from wifi_panel.state import Notification, Severity

CONTAINER_CLASS = "notification-container"


class NotificationView(Protocol):
    """Where notifications are drawn."""

    def mount(self, notification: Notification) -> None: ...

    def show(self, notification: Notification) -> None: ...

    def hide(self, notification: Notification) -> None: ...

    def remove(self, notification: Notification) -> None: ...


class NiceGuiNotificationView:
    """Draw notifications as labels inside a lazily created page container."""

    def __init__(self, anchor: ui.element) -> None:
        self._anchor = anchor
        self._container: ui.element | None = None
        self._elements: dict[int, ui.label] = {}

    @property
    def container(self) -> ui.element | None:
        return self._container

    def ensure_container(self) -> ui.element:
        # Single event loop, so check-then-create cannot race
        if self._container is None:
            with self._anchor:
                self._container = ui.element("div").classes(CONTAINER_CLASS)
        return self._container

    def mount(self, notification: Notification) -> None:
        container = self.ensure_container()
        with container:
            label = ui.label(notification.message).classes(
                f"notification notification-{notification.severity.value}"
            )
        self._elements[id(notification)] = label

    def _live(self, notification: Notification) -> ui.label | None:
        label = self._elements.get(id(notification))
        # Gone with the page when the tab was closed
        if label is None or label.is_deleted:
            return None
        return label

    def show(self, notification: Notification) -> None:
        label = self._live(notification)
        if label is not None:
            label.classes(add="notification-show")

    def hide(self, notification: Notification) -> None:
        label = self._live(notification)
        if label is not None:
            label.classes(remove="notification-show")

    def remove(self, notification: Notification) -> None:
        label = self._live(notification)
        self._elements.pop(id(notification), None)
        if label is not None:
            label.delete()


class NotificationCenter:
    """
    Queue and display short-lived messages.

    Each notification is mounted hidden, shown after ``show_delay``, hidden
    again after ``display`` and removed once the ``fade`` transition is over.
    """

    def __init__(
        self,
        view: NotificationView,
        show_delay: float = NOTIFY_SHOW_DELAY_S,
        display: float = NOTIFY_DISPLAY_S,
        fade: float = NOTIFY_FADE_S,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.view = view
        self.log = log or logging.getLogger(PANEL_LOGGER)
        self.show_delay = show_delay
        self.display = display
        self.fade = fade
        self.active: list[Notification] = []
        self._tasks: set[asyncio.Task] = set()

    def notify(self, message: str, severity: Severity = Severity.SUCCESS) -> None:
        notification = Notification(message=message, severity=severity)
        if severity is Severity.ERROR:
            self.log.warning("Notify: %s", message)
        else:
            self.log.info("Notify: %s", message)

        self.view.mount(notification)
        self.active.append(notification)
        task = asyncio.get_running_loop().create_task(self._lifecycle(notification))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _lifecycle(self, notification: Notification) -> None:
        try:
            # Let the hidden state reach the browser so the CSS transition fires
            await asyncio.sleep(self.show_delay)
            notification.phase = "shown"
            self.view.show(notification)

            await asyncio.sleep(self.display)
            notification.phase = "hiding"
            self.view.hide(notification)

            await asyncio.sleep(self.fade)
        finally:
            notification.phase = "removed"
            if notification in self.active:
                self.active.remove(notification)
            self.view.remove(notification)

    def close(self) -> None:
        """Cut every pending lifecycle short; the page is going away."""
        for task in list(self._tasks):
            task.cancel()

    async def drain(self) -> list[Exception]:
        """Wait until every pending notification has been removed.

        Returns the errors raised by lifecycles, if any.
        """
        errors: list[Exception] = []
        while self._tasks:
            results = await asyncio.gather(*list(self._tasks), return_exceptions=True)
            errors.extend(r for r in results if isinstance(r, Exception))
        return errors
