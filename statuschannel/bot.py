"""
Cliente de Discord que mantiene la sesión y arranca el monitor.
By Killerbite95
"""

import logging
from typing import Optional

import discord

from .models import Settings
from .monitor import StatusMonitor
from .query_handlers import ServerPoller
from .updater import ChannelUpdater

logger = logging.getLogger("statuschannel")


class StatusBot(discord.Client):
    """Refleja el estado de un servidor de juego en el nombre de un canal. By Killerbite95"""

    __author__ = "Killerbite95"

    def __init__(self, settings: Settings, poller: Optional[ServerPoller] = None) -> None:
        # Solo hace falta la caché de canales
        intents = discord.Intents.none()
        intents.guilds = True
        super().__init__(intents=intents)

        self.settings: Settings = settings
        self.monitor: StatusMonitor = StatusMonitor(
            settings,
            poller or ServerPoller.for_game(settings.server.game),
            ChannelUpdater(self),
        )

    async def on_ready(self) -> None:
        """Se ejecuta cuando la sesión está lista (también tras reconectar)."""
        logger.info(f"{self.user} está conectado")

        activity = self.settings.discord.activity
        if activity:
            await self.change_presence(activity=discord.Game(name=activity))

        # on_ready puede repetirse; el bucle se arranca una sola vez
        if not self.monitor.running:
            self.monitor.start()

    async def close(self) -> None:
        """Limpieza al cerrar la sesión."""
        self.monitor.stop()
        await super().close()
