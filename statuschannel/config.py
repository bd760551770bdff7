"""
Carga y validación del fichero de configuración (TOML).
By Killerbite95
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from .exceptions import ConfigurationError, InvalidPortError, UnsupportedGameError
from .formatter import MAX_CHANNEL_NAME_LENGTH
from .models import DiscordSettings, FormatSettings, GameType, ServerSettings, Settings

logger = logging.getLogger("statuschannel.config")

DEFAULT_CONFIG_PATH = "config.toml"
CONFIG_PATH_ENV = "STATUSCHANNEL_CONFIG"
TOKEN_ENV = "DISCORD_TOKEN"


def _valid_port(port: Any) -> bool:
    """Valida que un puerto esté en el rango válido."""
    return isinstance(port, int) and not isinstance(port, bool) and 1 <= port <= 65535


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name)
    if not isinstance(section, dict):
        raise ConfigurationError(name, "sección ausente")
    return section


def _require(section: Dict[str, Any], section_name: str, key: str, kind: type) -> Any:
    """Obtiene un campo obligatorio comprobando su tipo."""
    full_key = f"{section_name}.{key}"
    if key not in section:
        raise ConfigurationError(full_key, "campo obligatorio")
    value = section[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigurationError(full_key, f"se esperaba {kind.__name__}, recibido {value!r}")
    return value


def parse_settings(data: Dict[str, Any], env: Optional[Dict[str, str]] = None) -> Settings:
    """
    Construye Settings a partir de un documento ya parseado.

    Args:
        data: Documento clave/valor con secciones discord, server y format
        env: Entorno para sobrescribir el token (por defecto os.environ)

    Raises:
        ConfigurationError: Si falta un campo o tiene un valor inválido
        InvalidPortError: Si el puerto está fuera de rango
    """
    env = os.environ if env is None else env

    discord_section = _section(data, "discord")
    server_section = _section(data, "server")
    format_section = _section(data, "format")

    # Token: variable de entorno > fichero
    token = env.get(TOKEN_ENV) or discord_section.get("token")
    if not isinstance(token, str) or not token.strip():
        raise ConfigurationError("discord.token", f"vacío; defínelo en el fichero o en {TOKEN_ENV}")

    channel_id = _require(discord_section, "discord", "channel_id", int)
    if channel_id <= 0:
        raise ConfigurationError("discord.channel_id", f"ID inválido: {channel_id}")

    activity = discord_section.get("activity")
    if activity is not None and not isinstance(activity, str):
        raise ConfigurationError("discord.activity", "debe ser texto")

    host = _require(server_section, "server", "host", str).strip()
    if not host:
        raise ConfigurationError("server.host", "vacío")

    if "port" not in server_section:
        raise ConfigurationError("server.port", "campo obligatorio")
    port = server_section["port"]
    if not _valid_port(port):
        raise InvalidPortError(port)

    interval = _require(server_section, "server", "interval", int)
    if interval <= 0:
        raise ConfigurationError("server.interval", f"debe ser mayor que 0, recibido {interval}")

    game_str = server_section.get("game", GameType.MINECRAFT.value)
    game = GameType.from_string(game_str) if isinstance(game_str, str) else None
    if game is None:
        raise UnsupportedGameError(str(game_str), GameType.supported_games())

    online = _require(format_section, "format", "online", str)
    offline = _require(format_section, "format", "offline", str)
    if len(offline) > MAX_CHANNEL_NAME_LENGTH:
        raise ConfigurationError(
            "format.offline",
            f"máximo {MAX_CHANNEL_NAME_LENGTH} caracteres, recibido {len(offline)}"
        )

    return Settings(
        discord=DiscordSettings(token=token.strip(), channel_id=channel_id, activity=activity or None),
        server=ServerSettings(host=host, port=port, interval=interval, game=game),
        format=FormatSettings(online=online, offline=offline),
    )


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Ruta del fichero: argumento > STATUSCHANNEL_CONFIG > config.toml."""
    if path:
        return Path(path)
    return Path(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Lee el fichero TOML y devuelve la configuración validada.
    Carga antes un .env si existe.

    Raises:
        ConfigurationError: Fichero ausente, TOML inválido o campos incorrectos
    """
    load_dotenv()
    config_path = resolve_config_path(path)

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(str(config_path), "fichero no encontrado") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(config_path), f"TOML inválido: {e}") from e

    settings = parse_settings(data)
    logger.info(f"Configuración cargada desde {config_path}")
    return settings
