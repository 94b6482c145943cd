from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from wifi_panel.services.device_client import ErrorKind, Failure, Success
from wifi_panel.state import CredentialSubmission, Notification, StatusSnapshot


@dataclass
class ViewEvent:
    action: str  # "mount" | "show" | "hide" | "remove"
    message: str
    t: float  # loop time when the view saw it


class RecordingView:
    """NotificationView that records calls and tracks what is on screen."""

    def __init__(self) -> None:
        self.events: list[ViewEvent] = []
        self.mounted: list[Notification] = []
        self.visible: set[int] = set()

    def _record(self, action: str, notification: Notification) -> None:
        t = asyncio.get_running_loop().time()
        self.events.append(ViewEvent(action, notification.message, t))

    def mount(self, notification: Notification) -> None:
        self._record("mount", notification)
        self.mounted.append(notification)

    def show(self, notification: Notification) -> None:
        self._record("show", notification)
        self.visible.add(id(notification))

    def hide(self, notification: Notification) -> None:
        self._record("hide", notification)
        self.visible.discard(id(notification))

    def remove(self, notification: Notification) -> None:
        self._record("remove", notification)
        self.mounted.remove(notification)

    def actions_for(self, message: str) -> list[str]:
        return [e.action for e in self.events if e.message == message]


@dataclass
class RecorderNotifications:
    """Stand-in NotificationCenter that only records notify() calls."""

    calls: list[tuple[str, str]] = field(default_factory=list)

    def notify(self, message: str, severity=None) -> None:
        self.calls.append((message, severity.value if severity else "success"))


class RecorderClient:
    """Records device calls and replies with canned results."""

    def __init__(self) -> None:
        self.saved: list[CredentialSubmission] = []
        self.clear_calls = 0
        self.status_calls = 0
        self.save_result = Success(None)
        self.clear_result = Success(None)
        self.status_results: list = []

    async def fetch_status(self):
        self.status_calls += 1
        if self.status_results:
            return self.status_results.pop(0)
        return Failure(ErrorKind.TRANSPORT, "no canned status")

    async def save_credentials(self, submission: CredentialSubmission):
        self.saved.append(submission)
        return self.save_result

    async def clear_credentials(self):
        self.clear_calls += 1
        return self.clear_result


class GatedClient:
    """fetch_status() blocks until the test releases that call's gate."""

    def __init__(self) -> None:
        self.gates: list[asyncio.Future] = []

    async def fetch_status(self):
        fut = asyncio.get_running_loop().create_future()
        self.gates.append(fut)
        return await fut

    def release(self, index: int, snapshot: StatusSnapshot) -> None:
        self.gates[index].set_result(Success(snapshot))


def make_confirm(answer: bool):
    """Build an async confirm callable that records the prompts it was asked."""
    prompts: list[str] = []

    async def _confirm(message: str) -> bool:
        prompts.append(message)
        return answer

    _confirm.prompts = prompts  # type: ignore[attr-defined]
    return _confirm
