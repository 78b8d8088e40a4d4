"""Entry point de demonstração: imprime a carta em JSON e em XML.

Uso:
    message-builder                # JSON e XML, um por linha
    message-builder --format xml   # apenas XML
"""

from __future__ import annotations

import argparse
import logging
import sys

from api.payload_builders.message import get_message_builder
from app.bootstrap import initialize_app, validate_runtime_settings
from app.constants.formats import MessageFormat
from app.coordinators.sender import Sender
from app.observability import correlation_scope
from utils.errors import SerializationError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        type=MessageFormat.parse,
        choices=list(MessageFormat),
        help="Formato de saída (json|xml). Pode repetir. Padrão: todos.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    initialize_app()
    validate_runtime_settings()

    formats = args.formats or list(MessageFormat)
    sender = Sender()

    with correlation_scope():
        for message_format in formats:
            try:
                message = sender.build_message(get_message_builder(message_format))
            except SerializationError:
                logger.exception(
                    "message_build_failed",
                    extra={"component": "main", "format": str(message_format)},
                )
                return 1
            print(message.text())

    return 0


if __name__ == "__main__":
    sys.exit(main())
