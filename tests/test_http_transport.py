"""HttpTransport over httpx.MockTransport."""

import httpx
import pytest

from parse_rest.errors import TransportError
from parse_rest.transport.http import HttpTransport


def make_transport(handler) -> HttpTransport:
    return HttpTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_sends_body_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = request.content
        seen["content_type"] = request.headers["Content-Type"]
        return httpx.Response(200, json={"objectId": "abc"})

    transport = make_transport(handler)
    result = await transport.perform(
        "https://api.example.com/parse/classes/Foo", "POST", '{"a": 1}', {"Content-Type": "text/plain"},
    )
    await transport.close()

    assert result.status == 200
    assert result.body == {"objectId": "abc"}
    assert seen == {
        "method": "POST",
        "url": "https://api.example.com/parse/classes/Foo",
        "body": b'{"a": 1}',
        "content_type": "text/plain",
    }


@pytest.mark.asyncio
async def test_non_json_body_is_raw_text():
    transport = make_transport(lambda request: httpx.Response(502, text="Bad Gateway"))
    result = await transport.perform("https://h/x", "POST", "{}", {})
    assert result.status == 502
    assert result.body == "Bad Gateway"


@pytest.mark.asyncio
async def test_connection_refused_is_status_zero():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = await make_transport(handler).perform("https://h/x", "POST", "{}", {})
    assert result.status == 0
    assert result.body is None


@pytest.mark.asyncio
async def test_other_failures_raise_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TransportError) as exc_info:
        await make_transport(handler).perform("https://h/x", "POST", "{}", {})
    assert exc_info.value.details == {"type": "ReadTimeout", "url": "https://h/x"}
