import json

import httpx
import pytest

from models import Button, Link, SendLinks, SendText
from nearby.delivery import WebhookSink

URL = "https://transport.test/send"


def make_sink(handler):
    received = []

    def recording(request):
        received.append(json.loads(request.content))
        return handler(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(recording))
    return WebhookSink(URL, client=http), received


ACTIONS = [
    SendText(conversation_id=1, text="Choose a search radius:", buttons=[[Button(label="2 km", payload="radius_2")]]),
    SendLinks(conversation_id=1, text="Weather", links=[Link(label="Windy", url="https://www.windy.com/1/2")]),
]


class TestWebhookSink:
    @pytest.mark.asyncio
    async def test_posts_each_action_in_order(self):
        sink, received = make_sink(lambda request: httpx.Response(200))
        delivered = await sink.deliver(ACTIONS)

        assert delivered == 2
        assert [body["type"] for body in received] == ["send_text", "send_links"]
        assert received[0]["buttons"][0][0] == {"label": "2 km", "payload": "radius_2", "kind": "callback"}

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_skipped(self):
        statuses = iter([500, 200])
        sink, received = make_sink(lambda request: httpx.Response(next(statuses)))
        delivered = await sink.deliver(ACTIONS)

        assert delivered == 1
        assert len(received) == 2

    @pytest.mark.asyncio
    async def test_transport_error_does_not_raise(self):
        def fail(request):
            raise httpx.ConnectError("down", request=request)

        sink, _ = make_sink(fail)
        assert await sink.deliver(ACTIONS) == 0
