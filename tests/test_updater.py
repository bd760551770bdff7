import asyncio
import logging

import aiohttp
import discord
import pytest

from statuschannel.updater import ChannelUpdater

from conftest import FakeChannel, FakeClient, http_exception


def test_update_renames_cached_channel():
    channel = FakeChannel(1234)
    client = FakeClient(channel)
    assert asyncio.run(ChannelUpdater(client).update(1234, "5/10 online")) is True
    assert channel.names == ["5/10 online"]
    assert client.fetched == []


def test_update_fetches_uncached_channel():
    channel = FakeChannel(1234)
    client = FakeClient(channel, cached=False)
    assert asyncio.run(ChannelUpdater(client).update(1234, "up")) is True
    assert client.fetched == [1234]
    assert channel.names == ["up"]


@pytest.mark.parametrize("error", [
    http_exception(discord.HTTPException, 500),
    http_exception(discord.Forbidden, 403),
    http_exception(discord.NotFound, 404),
    OSError("connection reset"),
    aiohttp.ServerDisconnectedError(),
    aiohttp.ClientPayloadError("truncated body"),
])
def test_update_failure_returns_false_and_logs(caplog, error):
    client = FakeClient(FakeChannel(1234, error=error))
    with caplog.at_level(logging.ERROR, logger="statuschannel.updater"):
        result = asyncio.run(ChannelUpdater(client).update(1234, "name"))
    assert result is False
    assert "1234" in caplog.text


def test_update_unknown_channel_returns_false():
    client = FakeClient(None, cached=False, fetch_error=http_exception(discord.NotFound, 404))
    assert asyncio.run(ChannelUpdater(client).update(999, "name")) is False


def test_update_channel_without_edit_returns_false():
    client = FakeClient(cached=False)
    client.channel = object()
    assert asyncio.run(ChannelUpdater(client).update(1234, "name")) is False
