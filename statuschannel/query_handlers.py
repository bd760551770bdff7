"""
Query Handlers para StatusChannel.
Implementa el patrón Strategy para diferentes protocolos de query
y el poller que normaliza cualquier fallo a Unreachable.
By Killerbite95
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple, Type

from opengsq.protocols import Minecraft, Source

from .models import GameType, PollOutcome, Reachable, Unreachable
from .exceptions import (
    MissingPlayerDataError,
    QueryConnectionError,
    QueryError,
    QueryTimeoutError,
    UnsupportedGameError,
)

logger = logging.getLogger("statuschannel.query")

# Techo fijo de cada poll, independiente del intervalo
POLL_TIMEOUT = 20.0


def _validate_counts(host: str, port: int, online: Any, max_players: Any) -> Tuple[int, int]:
    """Comprueba que online/max sean enteros no negativos."""
    for field_name, value in (("online", online), ("max", max_players)):
        if value is None:
            raise MissingPlayerDataError(host, port, f"falta '{field_name}'")
        if isinstance(value, bool) or not isinstance(value, int):
            raise MissingPlayerDataError(host, port, f"'{field_name}' no es entero: {value!r}")
        if value < 0:
            raise MissingPlayerDataError(host, port, f"'{field_name}' negativo: {value}")
    return online, max_players


class QueryHandler(ABC):
    """Clase base abstracta para handlers de query (Patrón Strategy)."""

    @abstractmethod
    async def query(self, host: str, port: int, timeout: float = POLL_TIMEOUT) -> Reachable:
        """
        Realiza una query al servidor.

        Args:
            host: IP o hostname del servidor
            port: Puerto de query
            timeout: Timeout del socket en segundos

        Returns:
            Reachable con los jugadores conectados

        Raises:
            QueryError: Si el servidor no responde o la respuesta no es válida
        """
        pass


class MinecraftQueryHandler(QueryHandler):
    """Handler para servidores Minecraft (Server List Ping)."""

    async def query(self, host: str, port: int, timeout: float = POLL_TIMEOUT) -> Reachable:
        """Realiza query usando Minecraft Status Protocol."""
        start_time = time.perf_counter()

        try:
            mc = Minecraft(host=host, port=port, timeout=timeout)
            info = await mc.get_status()
        except TimeoutError as e:
            logger.debug(f"Timeout en Minecraft query {host}:{port}: {e}")
            raise QueryTimeoutError(host, port, timeout) from e
        except (ConnectionError, OSError) as e:
            logger.debug(f"Error de conexión en Minecraft query {host}:{port}: {e}")
            raise QueryConnectionError(host, port, str(e)) from e
        except KeyError as e:
            # opengsq accede a data["players"] al limpiar colores
            raise MissingPlayerDataError(host, port, f"falta {e}") from e

        latency_ms = (time.perf_counter() - start_time) * 1000

        players = info.get("players") if isinstance(info, dict) else None
        if not isinstance(players, dict):
            raise MissingPlayerDataError(host, port)

        online, max_players = _validate_counts(
            host, port, players.get("online"), players.get("max")
        )
        return Reachable(online=online, max=max_players, latency_ms=latency_ms)


class SourceQueryHandler(QueryHandler):
    """Handler para servidores que usan el protocolo Source Query."""

    async def query(self, host: str, port: int, timeout: float = POLL_TIMEOUT) -> Reachable:
        """Realiza query usando Source Query Protocol (A2S_INFO)."""
        start_time = time.perf_counter()

        try:
            source = Source(host=host, port=port, timeout=timeout)
            info = await source.get_info()
        except TimeoutError as e:
            logger.debug(f"Timeout en Source query {host}:{port}: {e}")
            raise QueryTimeoutError(host, port, timeout) from e
        except (ConnectionError, OSError) as e:
            logger.debug(f"Error de conexión en Source query {host}:{port}: {e}")
            raise QueryConnectionError(host, port, str(e)) from e

        latency_ms = (time.perf_counter() - start_time) * 1000

        online, max_players = _validate_counts(
            host, port,
            getattr(info, "players", None),
            getattr(info, "max_players", None),
        )
        return Reachable(online=online, max=max_players, latency_ms=latency_ms)


class QueryHandlerFactory:
    """Factory para obtener el handler apropiado según el tipo de juego."""

    _handlers: Dict[GameType, Type[QueryHandler]] = {
        GameType.MINECRAFT: MinecraftQueryHandler,
        GameType.SOURCE: SourceQueryHandler,
    }

    _instances: Dict[Type[QueryHandler], QueryHandler] = {}

    @classmethod
    def get_handler(cls, game: GameType) -> QueryHandler:
        """
        Obtiene el handler apropiado para un tipo de juego.

        Raises:
            UnsupportedGameError: Si el juego no está soportado
        """
        handler_class = cls._handlers.get(game)
        if handler_class is None:
            raise UnsupportedGameError(
                game.value if game else "unknown",
                GameType.supported_games()
            )

        # Singleton por tipo de handler
        if handler_class not in cls._instances:
            cls._instances[handler_class] = handler_class()

        return cls._instances[handler_class]


class ServerPoller:
    """
    Envuelve un QueryHandler con un timeout fijo.
    Nunca lanza: cualquier fallo se convierte en Unreachable.
    """

    def __init__(self, handler: QueryHandler):
        self._handler = handler

    @classmethod
    def for_game(cls, game: GameType) -> "ServerPoller":
        return cls(QueryHandlerFactory.get_handler(game))

    async def poll(self, host: str, port: int, timeout: float = POLL_TIMEOUT) -> PollOutcome:
        """
        Consulta el estado del servidor una sola vez, sin reintentos.

        Args:
            host: IP o hostname del servidor
            port: Puerto de query
            timeout: Tiempo máximo total del poll

        Returns:
            Reachable o Unreachable
        """
        try:
            outcome = await asyncio.wait_for(
                self._handler.query(host, port, timeout=timeout),
                timeout=timeout
            )
        except asyncio.TimeoutError:
            error = QueryTimeoutError(host, port, timeout)
            logger.warning(f"Query falló para {host}:{port}: {error}")
            return Unreachable(reason=str(error))
        except QueryError as e:
            logger.warning(f"Query falló para {host}:{port}: {e}")
            return Unreachable(reason=str(e))
        except Exception as e:
            logger.error(f"Error inesperado en query {host}:{port}: {e!r}")
            return Unreachable(reason=repr(e))

        if outcome.latency_ms is not None:
            logger.debug(f"Ping a {host}:{port} tardó {outcome.latency_ms:.0f} ms")
        return outcome
