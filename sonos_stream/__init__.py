"""UPnP event subscriptions for Sonos speakers: core types, the subscription base class and HTTP SUBSCRIBE/UNSUBSCRIBE."""

__version__ = "0.1.0"
__all__ = ["types", "subscription", "upnp"]