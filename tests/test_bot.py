import asyncio
from dataclasses import replace

import discord

from statuschannel.__main__ import build_parser, main
from statuschannel.bot import StatusBot
from statuschannel.query_handlers import ServerPoller

from conftest import FakeHandler, make_settings


def test_on_ready_sets_presence_and_starts_monitor_once():
    presences = []
    started = []

    async def scenario():
        settings = make_settings()
        settings = replace(settings, discord=replace(settings.discord, activity="Create For Fan"))
        bot = StatusBot(settings, poller=ServerPoller(FakeHandler()))

        async def change_presence(*, activity=None, status=None):
            presences.append(activity)

        forever = asyncio.Event()

        async def run_forever():
            started.append(True)
            await forever.wait()

        bot.change_presence = change_presence
        bot.monitor.run_forever = run_forever

        await bot.on_ready()
        await asyncio.sleep(0)
        # Reconexión: no debe arrancar un segundo bucle
        await bot.on_ready()
        await asyncio.sleep(0)

        assert bot.monitor.running
        bot.monitor.stop()

    asyncio.run(scenario())

    assert len(started) == 1
    assert len(presences) == 2
    assert isinstance(presences[0], discord.Game)
    assert presences[0].name == "Create For Fan"


def test_bot_uses_minimal_intents():
    bot = StatusBot(make_settings(), poller=ServerPoller(FakeHandler()))
    assert bot.intents.guilds
    assert not bot.intents.message_content


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.config is None
    assert args.log_level == "INFO"


def test_main_exits_with_error_on_missing_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STATUSCHANNEL_CONFIG", raising=False)
    assert main(["--config", str(tmp_path / "missing.toml")]) == 1
