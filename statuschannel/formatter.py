"""
Generación del nombre del canal a partir del resultado de un poll.
By Killerbite95
"""

from .models import FormatSettings, PollOutcome, Reachable

ONLINE_PLACEHOLDER = "$ONLINE"
MAX_PLACEHOLDER = "$MAX"

# Límite de Discord para nombres de canal
MAX_CHANNEL_NAME_LENGTH = 100


def truncate_name(name: str, limit: int = MAX_CHANNEL_NAME_LENGTH) -> str:
    """Trunca el nombre para cumplir con el límite de Discord."""
    if len(name) > limit:
        return name[:limit]
    return name


def format_status(outcome: PollOutcome, templates: FormatSettings) -> str:
    """
    Convierte un resultado de poll en el nombre del canal.

    Args:
        outcome: Reachable o Unreachable
        templates: Plantillas online/offline configuradas

    Returns:
        Nombre del canal, nunca más largo que MAX_CHANNEL_NAME_LENGTH
    """
    if isinstance(outcome, Reachable):
        name = (
            templates.online
            .replace(ONLINE_PLACEHOLDER, str(outcome.online))
            .replace(MAX_PLACEHOLDER, str(outcome.max))
        )
        return truncate_name(name)
    # Literal, sin sustitución; su longitud se valida al cargar la configuración
    return templates.offline
