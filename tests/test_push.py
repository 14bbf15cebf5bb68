import asyncio
import logging

from client.api_client import NetworkFailure
from client.push import VAPID_PUBLIC_KEY, PushChannel, url_base64_to_bytes


class FakeManager:
    def __init__(self, existing=None):
        self.key = None
        self.existing = existing
        self.unsubscribed = False

    async def subscribe(self, application_server_key):
        self.key = application_server_key
        return {"endpoint": "https://push.example/1", "keys": {"p256dh": "k", "auth": "a"}}

    async def get_subscription(self):
        return self.existing

    async def unsubscribe(self):
        self.unsubscribed = True


class FakeApi:
    def __init__(self, error=None):
        self.error = error
        self.posted = []

    async def subscribe(self, subscription):
        if self.error:
            raise self.error
        self.posted.append(subscription)
        return {"status": "subscribed"}


def test_url_base64_to_bytes():
    assert url_base64_to_bytes("AQAB") == b"\x01\x00\x01"
    assert url_base64_to_bytes("AQ") == b"\x01"
    assert url_base64_to_bytes("-_8") == b"\xfb\xff"
    assert len(url_base64_to_bytes(VAPID_PUBLIC_KEY)) == 48


def test_subscribe_posts_subscription():
    manager, api = FakeManager(), FakeApi()
    assert asyncio.run(PushChannel(manager, api).subscribe()) is True
    assert manager.key == url_base64_to_bytes(VAPID_PUBLIC_KEY)
    assert api.posted == [{"endpoint": "https://push.example/1", "keys": {"p256dh": "k", "auth": "a"}}]


def test_subscribe_failures_are_logged_not_raised(caplog):
    channel = PushChannel(FakeManager(), FakeApi(error=NetworkFailure("refused")))
    with caplog.at_level(logging.ERROR, logger="client"):
        assert asyncio.run(channel.subscribe()) is False
    assert any("Push subscription failed" in r.getMessage() for r in caplog.records)


def test_no_push_manager_means_no_push():
    api = FakeApi()
    assert asyncio.run(PushChannel(None, api).subscribe()) is False
    assert api.posted == []


def test_unsubscribe_only_when_subscribed():
    idle = FakeManager(existing=None)
    asyncio.run(PushChannel(idle, FakeApi()).unsubscribe())
    assert not idle.unsubscribed

    active = FakeManager(existing={"endpoint": "https://push.example/1"})
    asyncio.run(PushChannel(active, FakeApi()).unsubscribe())
    assert active.unsubscribed
