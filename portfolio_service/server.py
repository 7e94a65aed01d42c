"""Application assembly and the command that serves it."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from flask import Flask

from .handlers import about_blueprint, services_blueprint
from .repository import AboutRepository, ServicesRepository
from .usecase import AboutUsecase, ServicesUsecase

DEFAULT_PORT = 8080


def create_app() -> Flask:
    """Build the application with fresh in-memory stores."""
    app = Flask(__name__)
    app.json.sort_keys = False
    app.register_blueprint(about_blueprint(AboutUsecase(AboutRepository())))
    app.register_blueprint(services_blueprint(ServicesUsecase(ServicesRepository())))
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the application; the port comes from --port, $PORT or 8080."""
    env_port = os.environ.get("PORT")
    parser = argparse.ArgumentParser(prog="portfolio-service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument(
        "--port", type=int, default=int(env_port) if env_port else DEFAULT_PORT
    )
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()