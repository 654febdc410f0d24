# sonos_stream

Create, renew and cancel UPnP event subscriptions on Sonos speakers from
asyncio code.

## Modules

- `sonos_stream.types` holds the core data types:
  - `SpeakerId` – a frozen wrapper around the speaker's identifier string
    (`as_str()` and `str()` return it).
  - `Speaker` – `id`, `ip`, `name`, `room`; a plain string given for `id` or
    `ip` is converted to a `SpeakerId` or an `ipaddress` address.
  - `ServiceType` – `AV_TRANSPORT`, `RENDERING_CONTROL`, `ZONE_GROUP_TOPOLOGY`.
  - `SubscriptionScope` – `PER_SPEAKER`, `NETWORK_WIDE`.
  - `SubscriptionKey` – a hashable (speaker id, service type) pair.
  - `SubscriptionConfig` – `timeout_seconds` and `callback_url`.
  - `RawEvent` – an unparsed event body tagged with its subscription id,
    speaker and service.
  - `BrokerConfig` – settings with defaults: callback ports 3400–3500, a
    30 minute subscription timeout, a 5 minute renewal threshold, 3 retry
    attempts, a 2 second backoff base and an event buffer of 100.
- `sonos_stream.subscription` defines the abstract `Subscription` base class
  and the `SubscriptionError` family: `SubscriptionNetworkError`,
  `RenewalFailed`, `UnsubscribeFailed` and `SubscriptionExpired`.
- `sonos_stream.upnp` provides `UPnPSubscription`, which speaks the UPnP
  `SUBSCRIBE` / `UNSUBSCRIBE` protocol over HTTP using `httpx`, and the
  `extract_host(url)` helper, which returns `"host[:port]"` for a URL (the
  port is dropped when it is the scheme's default) or `None` when the URL has
  no scheme or host.

## Installation

```
pip install sonos_stream
```

## Subscribing to a speaker

```python
import asyncio

from sonos_stream.types import ServiceType, SpeakerId
from sonos_stream.upnp import UPnPSubscription


async def main():
    subscription = await UPnPSubscription.create_subscription(
        SpeakerId("RINCON_EXAMPLE"),
        ServiceType.AV_TRANSPORT,
        "http://192.168.1.100:1400/MediaRenderer/AVTransport/Event",
        "http://192.168.1.50:3400/notify",
        1800,
    )
    print("subscribed:", subscription.subscription_id)

    if subscription.time_until_renewal() is not None:
        await subscription.renew()

    await subscription.unsubscribe()


asyncio.run(main())
```

`create_subscription` sends `SUBSCRIBE` with the `HOST`, `CALLBACK`
(the callback URL in angle brackets), `NT: upnp:event` and
`TIMEOUT: Second-<n>` headers. The `SID` response header becomes the
subscription id; a `TIMEOUT: Second-<n>` response header, when present,
replaces the requested timeout. A failed request raises
`SubscriptionNetworkError`; a non-success status or a missing `SID` raises
`UnsubscribeFailed`.

On an existing subscription:

- `subscription_id`, `speaker_id` and `service_type` are read-only properties.
- `renew()` sends `SUBSCRIBE` with the `SID` and the timeout, then extends the
  expiry. It raises `SubscriptionExpired` once the subscription has been
  cancelled and `RenewalFailed` on a non-success status.
- `unsubscribe()` sends `UNSUBSCRIBE` with the `SID`. The subscription is
  inactive afterwards even if the request fails; a second call raises
  `UnsubscribeFailed("Already unsubscribed")`.
- `is_active()` is true until the subscription is cancelled or its timeout
  passes.
- `time_until_renewal()` returns the remaining time as a `timedelta` once it
  is within five minutes of expiry (`timedelta(0)` once expired), and `None`
  otherwise or after cancelling.
- `host_header()` gives the `HOST` header value used for the endpoint,
  falling back to `localhost:1400`.

Each request has a 10 second timeout.

## What this package does not do

It manages subscriptions only. It has no event broker, no HTTP server to
receive the `NOTIFY` callbacks a speaker sends, no parsing of event bodies,
no per-service knowledge of endpoint paths, no discovery of speakers and no
background task that renews subscriptions on its own. `BrokerConfig`,
`RawEvent`, `SubscriptionKey` and `SubscriptionScope` are data types for
code built on top of it; nothing in the package consumes them. There is no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```