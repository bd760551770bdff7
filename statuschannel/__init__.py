"""
StatusChannel - Bot de Discord
Muestra el estado de un servidor de juegos en el nombre de un canal.

By Killerbite95

Estructura del paquete:
    - bot.py: Cliente de Discord, presencia y arranque del monitor
    - monitor.py: Bucle poll -> formato -> renombrar -> esperar
    - query_handlers.py: Handlers de query con patrón Strategy y poller con timeout
    - formatter.py: Plantillas online/offline del nombre del canal
    - updater.py: Renombrado del canal en Discord
    - config.py: Carga del fichero TOML
    - models.py: Dataclasses y Enums
    - exceptions.py: Excepciones personalizadas
"""

from .bot import StatusBot
from .config import load_settings
from .formatter import format_status
from .models import Reachable, Settings, Unreachable
from .monitor import StatusMonitor
from .query_handlers import POLL_TIMEOUT, ServerPoller
from .updater import ChannelUpdater

__all__ = [
    "StatusBot",
    "StatusMonitor",
    "ServerPoller",
    "ChannelUpdater",
    "Settings",
    "Reachable",
    "Unreachable",
    "POLL_TIMEOUT",
    "format_status",
    "load_settings",
]
__version__ = "1.0.0"
__author__ = "Killerbite95"
