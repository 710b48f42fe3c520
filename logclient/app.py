"""Entry point wiring: config, logging, connection scope, and exit status."""

import logging
import sys

from logclient.config import Config, build_parser, load_config
from logclient.connection import LogConnection
from logclient.console import Console
from logclient.errors import ConfigError, UsageError
from logclient.sender import LogSender
from logclient.session import SessionController, SessionOutcome, TemplateSettings

logger = logging.getLogger(__name__)


def run_session(config: Config, console: Console) -> SessionOutcome:
    """Open the connection, run the menu loop, and release the socket."""
    with LogConnection(config.host, config.port, config.connect_timeout) as connection:
        settings = TemplateSettings(current=config.default_template, presets=config.presets)
        session = SessionController(
            console,
            LogSender(connection.writer),
            settings,
            close_connection=connection.close,
        )
        return session.run()


def run(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Run the client and return the process exit status."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )
    if console is None:
        console = Console()

    try:
        config = load_config(argv)
    except UsageError as e:
        console.write(build_parser().format_usage().rstrip())
        console.write(f"Error: {e}")
        return 1
    except (ConfigError, ValueError) as e:
        console.write(f"Error: {e}")
        return 1

    logging.getLogger().setLevel(config.log_level)
    logger.info("Connecting to %s:%d", config.host, config.port)

    try:
        outcome = run_session(config, console)
    except KeyboardInterrupt:
        console.write()
        logger.info("Interrupted, connection closed")
        return 0
    except Exception as e:
        logger.debug("Session aborted", exc_info=True)
        console.write(f"Error: {e}")
        return 1

    logger.info("Session ended (%s)", outcome.value)
    return 0


def main():
    sys.exit(run())
