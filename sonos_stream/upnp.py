"""UPnP GENA subscriptions over HTTP (SUBSCRIBE / UNSUBSCRIBE)."""

from __future__ import annotations

from datetime import timedelta
from typing import Optional
from urllib.parse import urlsplit

import httpx

from .subscription import (
    RenewalFailed,
    Subscription,
    SubscriptionNetworkError,
    UnsubscribeFailed,
)
from .types import ServiceType, SpeakerId

REQUEST_TIMEOUT_SECONDS = 10.0
FALLBACK_HOST = "localhost:1400"

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def extract_host(url: str) -> Optional[str]:
    """Return "host[:port]" for a URL, or None if it has no scheme or host.

    The port is left out when it is absent or the scheme's default.
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    if port is None or _DEFAULT_PORTS.get(parts.scheme.lower()) == port:
        return host
    return f"{host}:{port}"


def _status_text(response: httpx.Response) -> str:
    reason = response.reason_phrase
    return f"{response.status_code} {reason}" if reason else str(response.status_code)


def _parse_timeout_header(value: Optional[str]) -> Optional[int]:
    if value is None or not value.startswith("Second-"):
        return None
    number = value[len("Second-"):]
    if not number.isdigit():
        return None
    return int(number)


async def _send(method: str, url: str, headers: dict[str, str]) -> httpx.Response:
    try:
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS) as client:
            return await client.request(method, url, headers=headers)
    except httpx.HTTPError as exc:
        raise SubscriptionNetworkError(f"{method} request failed: {exc}") from exc


class UPnPSubscription(Subscription):
    """A subscription to a UPnP service's event endpoint."""

    def __init__(
        self,
        sid: str,
        speaker_id: SpeakerId,
        service_type: ServiceType,
        endpoint_url: str,
        timeout_seconds: int,
    ) -> None:
        super().__init__(sid, speaker_id, service_type, timeout_seconds)
        self.endpoint_url = endpoint_url

    @classmethod
    async def create_subscription(
        cls,
        speaker_id: SpeakerId,
        service_type: ServiceType,
        endpoint_url: str,
        callback_url: str,
        timeout_seconds: int,
    ) -> "UPnPSubscription":
        """Send a SUBSCRIBE request and return the subscription it establishes.

        Raises SubscriptionNetworkError if the request cannot be made and
        UnsubscribeFailed if the device rejects it or gives no SID.
        """
        headers = {
            "HOST": extract_host(endpoint_url) or FALLBACK_HOST,
            "CALLBACK": f"<{callback_url}>",
            "NT": "upnp:event",
            "TIMEOUT": f"Second-{timeout_seconds}",
        }
        response = await _send("SUBSCRIBE", endpoint_url, headers)
        if not response.is_success:
            raise UnsubscribeFailed(
                f"SUBSCRIBE failed: HTTP {_status_text(response)} - {response.text}"
            )

        sid = response.headers.get("SID")
        if sid is None:
            raise UnsubscribeFailed("Missing SID header in SUBSCRIBE response")

        granted = _parse_timeout_header(response.headers.get("TIMEOUT"))
        return cls(
            sid,
            speaker_id,
            service_type,
            endpoint_url,
            granted if granted is not None else timeout_seconds,
        )

    @property
    def subscription_id(self) -> str:
        """The SID assigned by the device."""
        return super().subscription_id

    @property
    def speaker_id(self) -> SpeakerId:
        """The speaker this subscription is for."""
        return super().speaker_id

    @property
    def service_type(self) -> ServiceType:
        """The service this subscription is for."""
        return super().service_type

    def host_header(self) -> str:
        """The HOST header value for requests to this subscription's endpoint."""
        return extract_host(self.endpoint_url) or FALLBACK_HOST

    async def renew(self) -> None:
        """Send a renewal SUBSCRIBE carrying the SID and extend the expiry."""
        await super().renew()

    async def unsubscribe(self) -> None:
        """Send UNSUBSCRIBE and mark the subscription inactive."""
        await super().unsubscribe()

    def is_active(self) -> bool:
        """True while not unsubscribed and not yet expired."""
        return super().is_active()

    def time_until_renewal(self) -> Optional[timedelta]:
        """Time left before expiry when within the renewal threshold, else None."""
        return super().time_until_renewal()

    async def _send_renewal(self) -> None:
        headers = {
            "HOST": self.host_header(),
            "SID": self.subscription_id,
            "TIMEOUT": f"Second-{self.timeout_seconds}",
        }
        response = await _send("SUBSCRIBE", self.endpoint_url, headers)
        if not response.is_success:
            raise RenewalFailed(f"Renewal failed: HTTP {_status_text(response)}")

    async def _send_unsubscribe(self) -> None:
        headers = {"HOST": self.host_header(), "SID": self.subscription_id}
        response = await _send("UNSUBSCRIBE", self.endpoint_url, headers)
        if not response.is_success:
            raise UnsubscribeFailed(f"UNSUBSCRIBE failed: HTTP {_status_text(response)}")