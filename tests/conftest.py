import asyncio
from types import SimpleNamespace
from typing import List, Optional

import discord
import pytest

from statuschannel.models import (
    DiscordSettings,
    FormatSettings,
    Reachable,
    ServerSettings,
    Settings,
)
from statuschannel.query_handlers import QueryHandler


def make_settings(
    interval: float = 60,
    online: str = "$ONLINE/$MAX online",
    offline: str = "Server offline",
    channel_id: int = 1234,
) -> Settings:
    return Settings(
        discord=DiscordSettings(token="test-token", channel_id=channel_id),
        server=ServerSettings(host="mc.example.com", port=25565, interval=interval),
        format=FormatSettings(online=online, offline=offline),
    )


def http_exception(cls=discord.HTTPException, status: int = 500, message: str = "boom"):
    """Construye una excepción de discord.py sin respuesta HTTP real."""
    response = SimpleNamespace(status=status, reason="Test")
    return cls(response, message)


class FakeHandler(QueryHandler):
    """Handler de query controlado por el test."""

    def __init__(self, result=None, error: Optional[BaseException] = None, delay: float = 0.0):
        self.result = result if result is not None else Reachable(online=5, max=10)
        self.error = error
        self.delay = delay
        self.calls: List[tuple] = []

    async def query(self, host, port, timeout=20.0):
        self.calls.append((host, port, timeout))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


class FakeChannel:
    def __init__(self, channel_id: int, error: Optional[BaseException] = None):
        self.id = channel_id
        self.error = error
        self.names: List[str] = []

    async def edit(self, *, name: str):
        if self.error is not None:
            raise self.error
        self.names.append(name)
        return self


class FakeClient:
    """Sustituye a discord.Client en ChannelUpdater."""

    def __init__(self, channel: Optional[FakeChannel] = None, cached: bool = True,
                 fetch_error: Optional[BaseException] = None):
        self.channel = channel
        self.cached = cached
        self.fetch_error = fetch_error
        self.fetched: List[int] = []

    def get_channel(self, channel_id):
        if self.cached and self.channel is not None and self.channel.id == channel_id:
            return self.channel
        return None

    async def fetch_channel(self, channel_id):
        self.fetched.append(channel_id)
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.channel


class RecordingUpdater:
    """Registra los nombres enviados; opcionalmente falla."""

    def __init__(self, error: Optional[BaseException] = None, result: bool = True):
        self.error = error
        self.result = result
        self.calls: List[tuple] = []

    async def update(self, channel_id, name):
        self.calls.append((channel_id, name))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture()
def settings():
    return make_settings()


@pytest.fixture()
def fake_handler():
    return FakeHandler()


@pytest.fixture()
def updater():
    return RecordingUpdater()
