"""
Bucle principal: poll -> formato -> renombrar canal -> esperar.
By Killerbite95
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from .formatter import format_status
from .models import Settings
from .query_handlers import POLL_TIMEOUT, ServerPoller
from .updater import ChannelUpdater

logger = logging.getLogger("statuschannel.monitor")

SleepFunc = Callable[[float], Awaitable[None]]


class StatusMonitor:
    """
    Ejecuta ciclos estrictamente secuenciales sobre un único servidor y canal.

    Un fallo en el poll o en la actualización del canal se registra y
    nunca detiene el bucle; el siguiente ciclo empieza tras el intervalo.
    """

    def __init__(
        self,
        settings: Settings,
        poller: ServerPoller,
        updater: ChannelUpdater,
        sleep: SleepFunc = asyncio.sleep,
        poll_timeout: float = POLL_TIMEOUT,
    ) -> None:
        self.settings = settings
        self.poller = poller
        self.updater = updater
        self._sleep = sleep
        self._poll_timeout = poll_timeout
        self._task: Optional[asyncio.Task] = None
        self.cycles = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_cycle(self) -> None:
        """Un ciclo completo. No propaga ninguna excepción."""
        server = self.settings.server
        channel_id = self.settings.discord.channel_id

        try:
            outcome = await self.poller.poll(server.host, server.port, self._poll_timeout)
            name = format_status(outcome, self.settings.format)
            logger.debug(f"{outcome.status.emoji} {server.address} -> '{name}'")
            await self.updater.update(channel_id, name)
        except Exception as e:
            logger.error(f"Error actualizando {server.address} en canal {channel_id}: {e!r}")
        finally:
            self.cycles += 1

    async def run_forever(self) -> None:
        """Repite ciclos indefinidamente; solo termina al cancelar la tarea."""
        interval = self.settings.server.interval
        logger.info(
            f"Monitorizando {self.settings.server.address} "
            f"({self.settings.server.game.display_name}) cada {interval}s"
        )
        while True:
            await self.run_cycle()
            await self._sleep(interval)

    def start(self) -> asyncio.Task:
        """Crea la tarea del bucle. Si ya está en marcha, devuelve la existente."""
        if self.running:
            logger.debug("El monitor ya está en marcha, se ignora start()")
            return self._task
        self._task = asyncio.create_task(self.run_forever(), name="statuschannel-monitor")
        return self._task

    def stop(self) -> None:
        """Cancela la tarea del bucle."""
        if self._task is not None:
            self._task.cancel()
            self._task = None
