from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Any

from nicegui import binding

PLACEHOLDER = "--"


class Mode(enum.Enum):
    AP = "AP"
    STATION = "STATION"

    @classmethod
    def from_wire(cls, value: str) -> Mode:
        # Device reports "AP" or its station tag ("STA"); anything but AP is a station
        return cls.AP if value == "AP" else cls.STATION


class Severity(enum.Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusSnapshot:
    connected: bool
    mode: Mode
    ip: str
    ssid: str | None = None
    rssi: int | None = None  # dBm

    @classmethod
    def from_payload(cls, payload: Any) -> StatusSnapshot:
        """Build a snapshot from the decoded ``/status`` body.

        Raises ValueError when the body does not have the expected shape.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"status body is not an object: {type(payload).__name__}")
        for key in ("connected", "mode", "ip"):
            if key not in payload:
                raise ValueError(f"status body missing '{key}'")

        connected = payload["connected"]
        mode = payload["mode"]
        ip = payload["ip"]
        ssid = payload.get("ssid")
        rssi = payload.get("rssi")

        if not isinstance(connected, bool):
            raise ValueError(f"'connected' must be a bool, got {connected!r}")
        if not isinstance(mode, str):
            raise ValueError(f"'mode' must be a string, got {mode!r}")
        if not isinstance(ip, str):
            raise ValueError(f"'ip' must be a string, got {ip!r}")
        if ssid is not None and not isinstance(ssid, str):
            raise ValueError(f"'ssid' must be a string, got {ssid!r}")
        if rssi is not None and (isinstance(rssi, bool) or not isinstance(rssi, int)):
            raise ValueError(f"'rssi' must be an integer, got {rssi!r}")

        return cls(
            connected=connected,
            mode=Mode.from_wire(mode),
            ip=ip,
            ssid=ssid,
            rssi=rssi,
        )


@dataclass(eq=False)
class Notification:
    message: str
    severity: Severity = Severity.SUCCESS
    created_at: float = field(default_factory=time.monotonic)
    phase: str = "hidden"  # hidden -> shown -> hiding -> removed


@dataclass(frozen=True)
class CredentialSubmission:
    ssid: str
    password: str = ""

    def form_fields(self) -> dict[str, str]:
        # Order matters for the wire body: ssid=...&password=...
        return {"ssid": self.ssid, "password": self.password}


# Rendered status shown on the page; labels bind to these fields
@binding.bindable_dataclass
class DeviceState:
    status_text: str = "Unknown"
    indicator: str = ""  # "connected" | "disconnected" once rendered
    mode_label: str = PLACEHOLDER
    ip: str = PLACEHOLDER
    ssid: str = PLACEHOLDER
    rssi: str = PLACEHOLDER
    last_update_ts: float = 0.0
