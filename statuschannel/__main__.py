"""
Punto de entrada: ``python -m statuschannel [--config config.toml]``.
By Killerbite95
"""

import argparse
import logging
import sys
from typing import List, Optional

import discord

from .bot import StatusBot
from .config import load_settings
from .exceptions import StatusChannelError

logger = logging.getLogger("statuschannel")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statuschannel",
        description="Muestra el estado de un servidor de juego en el nombre de un canal de Discord.",
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Ruta del fichero TOML (por defecto $STATUSCHANNEL_CONFIG o config.toml)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Nivel de logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    discord.utils.setup_logging(level=getattr(logging, args.log_level))

    try:
        settings = load_settings(args.config)
    except StatusChannelError as e:
        logger.error(f"No se pudo cargar la configuración: {e}")
        return 1

    bot = StatusBot(settings)
    try:
        # El logging ya está configurado arriba
        bot.run(settings.discord.token, log_handler=None)
    except discord.LoginFailure as e:
        logger.error(f"Token de Discord inválido: {e}")
        return 1
    except discord.PrivilegedIntentsRequired as e:
        logger.error(f"Intents no habilitados en el portal de desarrolladores: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
