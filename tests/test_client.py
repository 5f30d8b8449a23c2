"""AsyncParse / Parse facades wired with a fake transport."""

import json

import pytest

from parse_rest import AsyncParse, ConfigurationError, Parse, ParseConfig, ParseError, ParseUser


CONFIG = ParseConfig(server_url="https://h/parse", application_id="app", javascript_key="js")


@pytest.mark.asyncio
async def test_async_client_round_trip(fake_transport, fake_installations, ok):
    transport = fake_transport([ok({"results": []})])
    async with AsyncParse(CONFIG, transport=transport, installation_controller=fake_installations()) as parse:
        result = await parse.request("GET", "classes/GameScore", {"where": {"score": 1337}})
    assert result == {"results": []}
    payload = json.loads(transport.calls[0]["data"])
    assert payload["where"] == {"score": 1337}
    assert payload["_method"] == "GET"


@pytest.mark.asyncio
async def test_become_signs_requests_with_session_token(fake_transport, fake_installations, ok):
    transport = fake_transport([ok()])
    parse = AsyncParse(CONFIG, transport=transport, installation_controller=fake_installations())
    parse.become(ParseUser(objectId="u1", sessionToken="r:abc"))
    await parse.request("GET", "users/me")
    assert json.loads(transport.calls[0]["data"])["_SessionToken"] == "r:abc"


@pytest.mark.asyncio
async def test_ajax_is_not_normalized(fake_transport, fake_installations, ok):
    transport = fake_transport([ok({"raw": True})])
    parse = AsyncParse(CONFIG, transport=transport, installation_controller=fake_installations())
    result = await parse.ajax("POST", "https://h/parse/functions/ping", "{}")
    assert result.response == {"raw": True}
    assert result.status == 200


def test_sync_client(fake_transport, fake_installations, ok, status):
    transport = fake_transport([ok({"objectId": "abc"}), status(404, {"code": 101, "error": "invalid"})])
    parse = Parse(config=CONFIG, transport=transport, installation_controller=fake_installations())
    try:
        assert parse.request("POST", "classes/Foo", {"bar": 1}) == {"objectId": "abc"}
        with pytest.raises(ParseError) as exc_info:
            parse.request("GET", "classes/Foo/missing")
        assert exc_info.value.code == 101
        with pytest.raises(ConfigurationError):
            parse.request("GET", "classes/Foo", options={"useMasterKey": True})
        assert len(transport.calls) == 2
    finally:
        parse.close()
