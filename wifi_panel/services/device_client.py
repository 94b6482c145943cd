from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

import httpx

from wifi_panel.constants import DEVICE_URL, HTTP_TIMEOUT_S
from wifi_panel.state import CredentialSubmission, StatusSnapshot

T = TypeVar("T")


class ErrorKind(enum.Enum):
    VALIDATION = "validation"
    TRANSPORT = "transport"
    SERVER_REJECTION = "server_rejection"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    detail: str = ""
    status_code: int | None = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.kind.value} (HTTP {self.status_code}): {self.detail}"
        return f"{self.kind.value}: {self.detail}"


Result = Union[Success[T], Failure]


class DeviceClient:
    """
    HTTP client for the device's provisioning endpoints.

    Every call returns a Result; transport errors, non-2xx statuses and
    unparseable bodies come back as Failure instead of raising.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = HTTP_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    @base_url.setter
    def base_url(self, url: str) -> None:
        self._http.base_url = url

    async def _send(
        self, method: str, path: str, **kwargs
    ) -> httpx.Response | Failure:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            return Failure(ErrorKind.TRANSPORT, f"{method} {path}: {e!r}")
        if not response.is_success:
            return Failure(
                ErrorKind.SERVER_REJECTION,
                f"{method} {path} -> {response.reason_phrase}",
                status_code=response.status_code,
            )
        return response

    async def fetch_status(self) -> Result[StatusSnapshot]:
        response = await self._send("GET", "/status")
        if isinstance(response, Failure):
            return response
        try:
            snapshot = StatusSnapshot.from_payload(response.json())
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            return Failure(ErrorKind.MALFORMED_RESPONSE, str(e))
        return Success(snapshot)

    async def save_credentials(self, submission: CredentialSubmission) -> Result[None]:
        response = await self._send("POST", "/save", data=submission.form_fields())
        if isinstance(response, Failure):
            return response
        logging.debug("Device accepted credentials for SSID %r", submission.ssid)
        return Success(None)

    async def clear_credentials(self) -> Result[None]:
        response = await self._send("POST", "/clear")
        if isinstance(response, Failure):
            return response
        return Success(None)

    async def aclose(self) -> None:
        await self._http.aclose()


# Module-level singleton instance
client = DeviceClient(base_url=DEVICE_URL, timeout=HTTP_TIMEOUT_S)
