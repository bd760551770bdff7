"""
Actualización del nombre del canal de Discord.
By Killerbite95
"""

import logging

import discord

from .exceptions import ChannelUpdateError

logger = logging.getLogger("statuschannel.updater")


class ChannelUpdater:
    """
    Renombra un canal de Discord con una única llamada a la API.
    Los errores se registran y se devuelven como False, sin reintentos.
    """

    def __init__(self, client: discord.Client):
        self.client = client

    async def _resolve_channel(self, channel_id: int) -> discord.abc.GuildChannel:
        """Obtiene el canal desde la caché o, si no está, desde la API."""
        channel = self.client.get_channel(channel_id)
        if channel is None:
            channel = await self.client.fetch_channel(channel_id)
        if not hasattr(channel, "edit"):
            raise ChannelUpdateError(channel_id, "el canal no admite cambio de nombre")
        return channel

    async def update(self, channel_id: int, name: str) -> bool:
        """
        Cambia el nombre del canal.

        Args:
            channel_id: ID del canal de Discord
            name: Nuevo nombre para mostrar

        Returns:
            True si Discord aceptó el cambio, False en caso contrario
        """
        try:
            channel = await self._resolve_channel(channel_id)
            await channel.edit(name=name)
        except discord.NotFound:
            error = ChannelUpdateError(channel_id, "canal no encontrado")
        except discord.Forbidden:
            error = ChannelUpdateError(channel_id, "sin permisos (Manage Channels)")
        except discord.HTTPException as e:
            error = ChannelUpdateError(channel_id, f"error HTTP {e.status}: {e.text}")
        except ChannelUpdateError as e:
            error = e
        except Exception as e:
            # Errores de transporte (aiohttp, OSError) u otros de discord.py
            error = ChannelUpdateError(channel_id, repr(e))
        else:
            logger.info(f"Canal {channel_id} renombrado a '{name}'")
            return True

        logger.error(error.message)
        return False
