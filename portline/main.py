"""Main entry point for Portline."""

import asyncio
import signal
import sys
import logging
from typing import Optional

from hypercorn.asyncio import serve
from hypercorn.config import Config as HypercornConfig

from .api.server import create_api_app
from .context import AppContext
from .docker.runtime import DockerRuntime
from .shared.config import Config, get_config
from .shared.python_logger_config import setup_python_logging

logger = logging.getLogger(__name__)


def build_context(config: Config) -> AppContext:
    """Open the container runtime handle and build the application context.

    Raises:
        Exception: If the Docker client cannot be constructed
    """
    runtime = DockerRuntime(docker_host=config.DOCKER_HOST, timeout=config.RUNTIME_TIMEOUT)
    runtime.probe()
    return AppContext(runtime=runtime, api_key=config.API_KEY)


def create_hypercorn_config(config: Config) -> HypercornConfig:
    """Translate Portline configuration into Hypercorn settings."""
    server_config = HypercornConfig()
    server_config.bind = [config.bind]
    # Hypercorn only knows the standard level names
    server_config.loglevel = "DEBUG" if config.LOG_LEVEL == "TRACE" else config.LOG_LEVEL
    server_config.keep_alive_timeout = config.KEEP_ALIVE_TIMEOUT
    server_config.read_timeout = config.READ_TIMEOUT
    server_config.graceful_timeout = config.SHUTDOWN_GRACE_PERIOD
    return server_config


def install_signal_handlers(shutdown_event: asyncio.Event) -> None:
    """Set the shutdown event on SIGINT or SIGTERM."""
    loop = asyncio.get_running_loop()

    def handle_signal(sig: signal.Signals) -> None:
        logger.info(f"Received {sig.name}, shutting down...")
        shutdown_event.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, handle_signal, sig)


async def run_server(config: Config, context: AppContext) -> None:
    """Serve the API until a shutdown signal arrives.

    New connections stop on the signal. In-flight requests get up to
    ``SHUTDOWN_GRACE_PERIOD`` seconds before the server exits.
    """
    app = create_api_app(context)
    server_config = create_hypercorn_config(config)

    shutdown_event = asyncio.Event()
    install_signal_handlers(shutdown_event)

    logger.info(f"Server starting on http://{config.bind}")
    await serve(app, server_config, shutdown_trigger=shutdown_event.wait)
    logger.info("Server exited")


def create_asgi_app():
    """Create the FastAPI ASGI app for external ASGI servers.

    The runtime handle is released by the app's lifespan shutdown.
    """
    setup_python_logging()
    config = get_config()
    return create_api_app(build_context(config))


def main() -> None:
    """Main entry point for CLI execution."""
    setup_python_logging()
    context: Optional[AppContext] = None

    try:
        config = get_config()
        logger.info("=" * 60)
        logger.info("PORTLINE STARTING")
        logger.info("=" * 60)
        logger.info(f"Configuration loaded: bind={config.bind}, docker={config.DOCKER_HOST or 'local socket'}")

        context = build_context(config)
        asyncio.run(run_server(config, context))

    except KeyboardInterrupt:
        logger.info("Shutting down Portline (interrupted)")
    except Exception as e:
        logger.error(f"Failed to start Portline: {e}")
        print(f"ERROR: Failed to start Portline: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if context is not None:
            context.close()


if __name__ == "__main__":
    main()
