"""Entry point for the Recipes API server.

This script serves the FastAPI application with uvicorn.  Host, port
and log level come from the environment (see
``recipes_api.app.core.config``), for example::

    PORT=9000 SEED_RECIPES=1 python run.py
"""
import asyncio

from uvicorn import Config, Server

from recipes_api.app.core.config import settings
from recipes_api.app.main import create_app


async def run_api() -> None:
    """Start the API using uvicorn."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
