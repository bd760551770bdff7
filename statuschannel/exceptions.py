"""
Excepciones personalizadas para StatusChannel.
By Killerbite95
"""

from typing import Optional


class StatusChannelError(Exception):
    """Excepción base para todos los errores de StatusChannel."""

    def __init__(self, message: str = "Error en StatusChannel"):
        self.message = message
        super().__init__(self.message)


class QueryError(StatusChannelError):
    """Excepción base para errores de query a servidores."""

    def __init__(self, host: str, port: int, message: Optional[str] = None):
        self.host = host
        self.port = port
        self.message = message or f"Error al consultar {host}:{port}"
        super().__init__(self.message)


class QueryTimeoutError(QueryError):
    """Se lanza cuando una query al servidor excede el tiempo de espera."""

    def __init__(self, host: str, port: int, timeout: float = 20.0):
        self.timeout = timeout
        message = f"Timeout ({timeout}s) al consultar {host}:{port}"
        super().__init__(host, port, message)


class QueryConnectionError(QueryError):
    """Se lanza cuando no se puede establecer conexión con el servidor."""

    def __init__(self, host: str, port: int, reason: Optional[str] = None):
        self.reason = reason
        message = f"No se pudo conectar a {host}:{port}"
        if reason:
            message += f": {reason}"
        super().__init__(host, port, message)


class MissingPlayerDataError(QueryError):
    """El servidor respondió pero sin datos de jugadores utilizables."""

    def __init__(self, host: str, port: int, detail: Optional[str] = None):
        self.detail = detail
        message = f"Respuesta de {host}:{port} sin datos de jugadores"
        if detail:
            message += f" ({detail})"
        super().__init__(host, port, message)


class InvalidPortError(StatusChannelError):
    """Se lanza cuando se proporciona un puerto inválido."""

    def __init__(self, port: object):
        self.port = port
        message = f"Puerto inválido: {port}. Debe estar entre 1 y 65535."
        super().__init__(message)


class UnsupportedGameError(StatusChannelError):
    """Se lanza cuando se intenta usar un juego no soportado."""

    def __init__(self, game: str, supported_games: list):
        self.game = game
        self.supported_games = supported_games
        message = f"Juego '{game}' no soportado. Juegos disponibles: {', '.join(supported_games)}"
        super().__init__(message)


class ChannelUpdateError(StatusChannelError):
    """Describe un fallo al renombrar el canal de Discord."""

    def __init__(self, channel_id: int, reason: Optional[str] = None):
        self.channel_id = channel_id
        self.reason = reason
        message = f"No se pudo renombrar el canal {channel_id}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigurationError(StatusChannelError):
    """Se lanza cuando hay un error en el fichero de configuración."""

    def __init__(self, key: str, reason: Optional[str] = None):
        self.key = key
        self.reason = reason
        message = f"Error de configuración en '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
