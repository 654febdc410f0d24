import ipaddress
from datetime import timedelta

import pytest

from sonos_stream.types import (
    BrokerConfig,
    RawEvent,
    ServiceType,
    Speaker,
    SpeakerId,
    SubscriptionConfig,
    SubscriptionKey,
    SubscriptionScope,
)


def test_speaker_id_as_str_and_str():
    sid = SpeakerId("RINCON_TEST123")
    assert sid.as_str() == "RINCON_TEST123"
    assert str(sid) == "RINCON_TEST123"


def test_speaker_id_equality_and_hash():
    assert SpeakerId("a") == SpeakerId("a")
    assert SpeakerId("a") != SpeakerId("b")
    assert len({SpeakerId("a"), SpeakerId("a"), SpeakerId("b")}) == 2


def test_speaker_id_from_speaker_id():
    assert SpeakerId(SpeakerId("x")).as_str() == "x"


def test_speaker_id_rejects_non_string():
    with pytest.raises(TypeError):
        SpeakerId(42)


def test_speaker_parses_ip():
    speaker = Speaker(SpeakerId("RINCON_TEST123"), "192.168.1.100", "Test Speaker", "Living Room")
    assert speaker.ip == ipaddress.ip_address("192.168.1.100")
    assert str(speaker.ip) == "192.168.1.100"
    assert speaker.name == "Test Speaker"
    assert speaker.room == "Living Room"


def test_speaker_converts_string_id():
    speaker = Speaker("RINCON_TEST456", "10.0.0.2", "Kitchen", "Kitchen")
    assert speaker.id == SpeakerId("RINCON_TEST456")


def test_speaker_invalid_ip():
    with pytest.raises(ValueError):
        Speaker(SpeakerId("x"), "not-an-ip", "n", "r")


def test_service_type_values():
    assert ServiceType("AVTransport") is ServiceType.AV_TRANSPORT
    assert str(ServiceType.RENDERING_CONTROL) == "RenderingControl"
    assert len({ServiceType.AV_TRANSPORT, ServiceType.RENDERING_CONTROL, ServiceType.ZONE_GROUP_TOPOLOGY}) == 3


def test_subscription_scope_distinct():
    per_speaker = SubscriptionScope(SubscriptionScope.PER_SPEAKER.value)
    network_wide = SubscriptionScope(SubscriptionScope.NETWORK_WIDE.value)
    assert per_speaker is SubscriptionScope.PER_SPEAKER
    assert network_wide is SubscriptionScope.NETWORK_WIDE
    assert per_speaker != network_wide
    assert len(list(SubscriptionScope)) == 2


def test_subscription_key_as_dict_key():
    key = SubscriptionKey(SpeakerId("s1"), ServiceType.AV_TRANSPORT)
    table = {key: 1}
    assert table[SubscriptionKey(SpeakerId("s1"), ServiceType.AV_TRANSPORT)] == 1
    assert SubscriptionKey(SpeakerId("s1"), ServiceType.RENDERING_CONTROL) not in table


def test_broker_config_defaults():
    config = BrokerConfig()
    assert config.callback_port_range == (3400, 3500)
    assert config.subscription_timeout == timedelta(seconds=1800)
    assert config.renewal_threshold == timedelta(seconds=300)
    assert config.max_retry_attempts == 3
    assert config.retry_backoff_base == timedelta(seconds=2)
    assert config.event_buffer_size == 100


def test_broker_config_defaults_not_shared():
    a = BrokerConfig()
    b = BrokerConfig(max_retry_attempts=5)
    assert a.max_retry_attempts == 3
    assert b.max_retry_attempts == 5


def test_subscription_config_fields():
    config = SubscriptionConfig(1800, "http://192.168.1.50:3400/notify")
    assert config.timeout_seconds == 1800
    assert config.callback_url == "http://192.168.1.50:3400/notify"


def test_raw_event_fields():
    event = RawEvent("uuid:sub-1", SpeakerId("s1"), ServiceType.AV_TRANSPORT, "<e/>")
    assert event.subscription_id == "uuid:sub-1"
    assert event.speaker_id.as_str() == "s1"
    assert event.service_type is ServiceType.AV_TRANSPORT
    assert event.event_xml == "<e/>"