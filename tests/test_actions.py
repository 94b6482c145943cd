from __future__ import annotations

import httpx
import pytest

from tests.utils.fakes import RecorderClient, RecorderNotifications, make_confirm
from wifi_panel.services.actions import CLEAR_CONFIRM_PROMPT, ActionController
from wifi_panel.services.device_client import ErrorKind, Failure, Success


def _controller(client, confirm_answer: bool = True):
    notes = RecorderNotifications()
    confirm = make_confirm(confirm_answer)
    return ActionController(client, notes, confirm), notes, confirm


@pytest.mark.unit
async def test_save_empty_ssid_is_rejected_locally():
    client = RecorderClient()
    actions, notes, _ = _controller(client)

    result = await actions.save_credentials("", "anything")

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.VALIDATION
    assert client.saved == []
    assert notes.calls == [("Please enter SSID", "error")]


@pytest.mark.unit
async def test_save_success_over_http(device, device_client):
    notes = RecorderNotifications()
    actions = ActionController(device_client, notes, make_confirm(True))

    result = await actions.save_credentials("MyWiFi", "secret")

    assert isinstance(result, Success)
    (req,) = device.requests
    assert req.url.path == "/save"
    assert req.content == b"ssid=MyWiFi&password=secret"
    assert len(notes.calls) == 1
    message, severity = notes.calls[0]
    assert severity == "success"
    assert "reboot" in message and "connect" in message


@pytest.mark.unit
async def test_save_server_rejection_notifies_error(device, device_client):
    device.save_status = 500
    notes = RecorderNotifications()
    actions = ActionController(device_client, notes, make_confirm(True))

    result = await actions.save_credentials("MyWiFi", "secret")

    assert isinstance(result, Failure)
    assert notes.calls == [("Failed to save credentials", "error")]


@pytest.mark.unit
async def test_save_transport_error_notifies_error(device, device_client):
    device.raise_error = httpx.ConnectError("device rebooting")
    notes = RecorderNotifications()
    actions = ActionController(device_client, notes, make_confirm(True))

    result = await actions.save_credentials("MyWiFi", "secret")

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.TRANSPORT
    assert notes.calls == [("Error saving credentials", "error")]


@pytest.mark.unit
async def test_save_without_password_sends_empty_password():
    client = RecorderClient()
    actions, notes, _ = _controller(client)

    await actions.save_credentials("OpenNet")

    assert client.saved[0].form_fields() == {"ssid": "OpenNet", "password": ""}
    assert notes.calls[0][1] == "success"


@pytest.mark.unit
async def test_save_is_never_retried():
    client = RecorderClient()
    client.save_result = Failure(ErrorKind.TRANSPORT, "down")
    actions, notes, _ = _controller(client)

    await actions.save_credentials("MyWiFi", "secret")

    assert len(client.saved) == 1
    assert len(notes.calls) == 1


@pytest.mark.unit
async def test_clear_declined_does_nothing():
    client = RecorderClient()
    actions, notes, confirm = _controller(client, confirm_answer=False)

    result = await actions.clear_credentials()

    assert result is None
    assert client.clear_calls == 0
    assert notes.calls == []
    assert confirm.prompts == [CLEAR_CONFIRM_PROMPT]


@pytest.mark.unit
async def test_clear_confirmed_over_http(device, device_client):
    notes = RecorderNotifications()
    actions = ActionController(device_client, notes, make_confirm(True))

    result = await actions.clear_credentials()

    assert isinstance(result, Success)
    assert [(r.method, r.url.path) for r in device.requests] == [("POST", "/clear")]
    assert notes.calls == [("Credentials cleared! Device will reboot.", "success")]


@pytest.mark.unit
@pytest.mark.parametrize(
    ("failure", "message"),
    [
        (Failure(ErrorKind.SERVER_REJECTION, "500", status_code=500), "Failed to clear credentials"),
        (Failure(ErrorKind.TRANSPORT, "timeout"), "Error clearing credentials"),
    ],
)
async def test_clear_failure_notifies_error(failure, message):
    client = RecorderClient()
    client.clear_result = failure
    actions, notes, _ = _controller(client)

    result = await actions.clear_credentials()

    assert result is failure
    assert client.clear_calls == 1
    assert notes.calls == [(message, "error")]
