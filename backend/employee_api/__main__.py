"""CLI runner serving the Employee Directory API with uvicorn."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from .config import PORT, Settings
from .main import create_app

logger = logging.getLogger(__name__)


def cli(argv: list[str] | None = None) -> None:
    settings = Settings()
    parser = argparse.ArgumentParser(description='Run the Employee Directory API')
    parser.add_argument('--host', default='0.0.0.0', help='Interface to bind (port is fixed)')
    parser.add_argument('--log-level', default=settings.log_level, help='Logging level (INFO, DEBUG, ...)')

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, (args.log_level or 'INFO').upper(), logging.INFO),
                        format='[%(levelname)s] %(name)s: %(message)s')

    app = create_app(settings)
    logger.info('Backend running on port %s', PORT)
    uvicorn.run(app, host=args.host, port=PORT, log_level=args.log_level.lower(), log_config=None)


if __name__ == '__main__':  # pragma: no cover
    cli()
