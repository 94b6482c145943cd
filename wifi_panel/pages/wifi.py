from __future__ import annotations

from nicegui import ui

from wifi_panel.services.actions import ActionController
from wifi_panel.services.device_client import Failure


class ConfirmDialog:
    """Yes/no question that is awaited instead of blocking the page."""

    async def ask(self, message: str) -> bool:
        with ui.dialog() as dialog, ui.card():
            ui.label(message)
            with ui.row().classes("w-full justify-end gap-2"):
                ui.button("Cancel", on_click=lambda: dialog.submit(False)).props(
                    "flat"
                ).mark("confirm-cancel")
                ui.button("Confirm", on_click=lambda: dialog.submit(True)).props(
                    "color=negative"
                ).mark("confirm-ok")
        try:
            # Closing via backdrop/ESC resolves to None
            return bool(await dialog)
        finally:
            if not dialog.is_deleted:
                dialog.delete()


class WifiPage:
    """WiFi credentials card."""

    def __init__(self, actions: ActionController) -> None:
        self.actions = actions
        self.ssid_input: ui.input | None = None
        self.password_input: ui.input | None = None

    async def _on_save(self) -> None:
        ssid = (self.ssid_input.value or "") if self.ssid_input else ""
        password = (self.password_input.value or "") if self.password_input else ""
        result = await self.actions.save_credentials(ssid, password)
        if not isinstance(result, Failure) and self.password_input:
            self.password_input.value = ""

    async def _on_clear(self) -> None:
        await self.actions.clear_credentials()

    def build(self) -> None:
        with ui.card().classes("w-full"):
            ui.label("WiFi credentials").classes("text-md font-medium")
            with ui.column().classes("w-full gap-2"):
                self.ssid_input = (
                    ui.input(label="SSID").classes("w-full").mark("wifi-ssid")
                )
                self.password_input = ui.input(
                    label="Password", password=True, password_toggle_button=True
                ).classes("w-full").mark("wifi-password")
                # Enter-to-submit, like a form
                self.ssid_input.on("keydown.enter", self._on_save)
                self.password_input.on("keydown.enter", self._on_save)
            with ui.row().classes("items-center gap-2"):
                ui.button("Save", on_click=self._on_save).props("color=primary").mark(
                    "wifi-save"
                )
                ui.button("Clear credentials", on_click=self._on_clear).props(
                    "color=negative outline"
                ).mark("wifi-clear")
