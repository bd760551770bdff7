"""
Modelos de datos para StatusChannel.
Incluye Enums y dataclasses inmutables para configuración y resultados.
By Killerbite95
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, List, Union


class ServerStatus(Enum):
    """Estados posibles de un servidor."""
    ONLINE = auto()
    OFFLINE = auto()

    @property
    def emoji(self) -> str:
        """Retorna el emoji correspondiente al estado."""
        emojis = {
            ServerStatus.ONLINE: "✅",
            ServerStatus.OFFLINE: "🔴",
        }
        return emojis[self]


class GameType(Enum):
    """Protocolos de query soportados."""
    MINECRAFT = "minecraft"
    SOURCE = "source"

    @property
    def display_name(self) -> str:
        """Retorna el nombre completo del protocolo."""
        names = {
            GameType.MINECRAFT: "Minecraft",
            GameType.SOURCE: "Source Engine",
        }
        return names.get(self, self.value.upper())

    @classmethod
    def from_string(cls, game_str: str) -> Optional["GameType"]:
        """Convierte un string al GameType correspondiente."""
        game_str = game_str.lower().strip()
        for game in cls:
            if game.value == game_str:
                return game
        return None

    @classmethod
    def supported_games(cls) -> List[str]:
        """Retorna lista de juegos soportados."""
        return [game.value for game in cls]


# ==================== Resultados de poll ====================

@dataclass(frozen=True)
class Reachable:
    """El servidor respondió con número de jugadores."""
    online: int
    max: int
    latency_ms: Optional[float] = None

    @property
    def status(self) -> ServerStatus:
        return ServerStatus.ONLINE


@dataclass(frozen=True)
class Unreachable:
    """El servidor no respondió o la respuesta no era válida."""
    reason: str

    @property
    def status(self) -> ServerStatus:
        return ServerStatus.OFFLINE


PollOutcome = Union[Reachable, Unreachable]


# ==================== Configuración ====================

@dataclass(frozen=True)
class DiscordSettings:
    """Credenciales y canal de salida en Discord."""
    token: str
    channel_id: int
    activity: Optional[str] = None


@dataclass(frozen=True)
class ServerSettings:
    """Servidor de juego a monitorizar."""
    host: str
    port: int
    interval: int
    game: GameType = GameType.MINECRAFT

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class FormatSettings:
    """
    Plantillas del nombre del canal.

    ``online`` admite los marcadores ``$ONLINE`` y ``$MAX``;
    ``offline`` se usa literalmente.
    """
    online: str
    offline: str


@dataclass(frozen=True)
class Settings:
    """Configuración completa, cargada una vez al arrancar."""
    discord: DiscordSettings
    server: ServerSettings
    format: FormatSettings
