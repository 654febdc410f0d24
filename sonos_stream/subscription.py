"""Base class and errors for active UPnP event subscriptions."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional

from .types import ServiceType, SpeakerId

DEFAULT_RENEWAL_THRESHOLD = timedelta(seconds=300)


class SubscriptionError(Exception):
    """Base error for subscription operations."""


class SubscriptionNetworkError(SubscriptionError):
    """A network error occurred while talking to the device."""


class RenewalFailed(SubscriptionError):
    """The device rejected or failed a renewal request."""


class UnsubscribeFailed(SubscriptionError):
    """The unsubscribe request failed or the subscription was already gone."""


class SubscriptionExpired(SubscriptionError):
    """The subscription is no longer active."""

    def __init__(self, message: str = "Subscription expired") -> None:
        super().__init__(message)


class Subscription(ABC):
    """An active UPnP event subscription.

    Tracks expiry and activity; subclasses supply the network requests used
    to renew and cancel the subscription.
    """

    def __init__(
        self,
        subscription_id: str,
        speaker_id: SpeakerId,
        service_type: ServiceType,
        timeout_seconds: int,
        renewal_threshold: timedelta = DEFAULT_RENEWAL_THRESHOLD,
    ) -> None:
        self._subscription_id = subscription_id
        self._speaker_id = speaker_id
        self._service_type = service_type
        self.timeout_seconds = timeout_seconds
        self.renewal_threshold = renewal_threshold
        self._active = True
        self._expires_at = time.monotonic() + timeout_seconds

    @property
    def subscription_id(self) -> str:
        """The subscription ID (SID) assigned by the device."""
        return self._subscription_id

    @property
    def speaker_id(self) -> SpeakerId:
        """The speaker this subscription belongs to."""
        return self._speaker_id

    @property
    def service_type(self) -> ServiceType:
        """The service this subscription is for."""
        return self._service_type

    @abstractmethod
    async def _send_renewal(self) -> None:
        """Ask the device to extend the subscription."""

    @abstractmethod
    async def _send_unsubscribe(self) -> None:
        """Ask the device to cancel the subscription."""

    async def renew(self) -> None:
        """Renew the subscription, extending its expiry by its timeout."""
        if not self._active:
            raise SubscriptionExpired()
        await self._send_renewal()
        self._expires_at = time.monotonic() + self.timeout_seconds

    async def unsubscribe(self) -> None:
        """Cancel the subscription; it is inactive afterwards even if the request fails."""
        if not self._active:
            raise UnsubscribeFailed("Already unsubscribed")
        try:
            await self._send_unsubscribe()
        finally:
            self._active = False

    def is_active(self) -> bool:
        """True while not unsubscribed and not past expiry."""
        return self._active and time.monotonic() < self._expires_at

    def time_until_renewal(self) -> Optional[timedelta]:
        """Time left before expiry once within the renewal threshold, else None."""
        if not self._active:
            return None
        remaining = self._expires_at - time.monotonic()
        if remaining <= 0:
            return timedelta(0)
        remaining_delta = timedelta(seconds=remaining)
        if remaining_delta <= self.renewal_threshold:
            return remaining_delta
        return None