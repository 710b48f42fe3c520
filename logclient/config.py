"""Configuration: frozen dataclass built from YAML, env vars, and CLI args."""

import argparse
import logging
import os
from dataclasses import dataclass

import yaml

from logclient.errors import ConfigError, UsageError
from logclient.models import DEFAULT_TEMPLATE, PRESET_TEMPLATES, has_placeholder

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
USAGE = "%(prog)s <host> <port> [--config PATH] [--format TEMPLATE] [--timeout SECONDS] [--verbose]"


@dataclass(frozen=True)
class Config:
    host: str
    port: int
    connect_timeout: float = 5.0
    default_template: str = DEFAULT_TEMPLATE
    presets: tuple[str, ...] = PRESET_TEMPLATES
    log_level: str = "WARNING"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = _ArgumentParser(
        prog="logservice-client",
        usage=USAGE,
        description="Interactive test client for a line-oriented TCP logging service.",
    )
    parser.add_argument("host", help="Logging server address")
    parser.add_argument("port", type=_port, help="Logging server port")
    parser.add_argument(
        "--config", default=None,
        help="Path to YAML config file (default: $LOGCLIENT_CONFIG)",
    )
    parser.add_argument(
        "--format", dest="template", default=None,
        help="Initial log message format template",
    )
    parser.add_argument(
        "--timeout", type=float, default=None,
        help="Connect timeout in seconds (default: 5.0)",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log client diagnostics at DEBUG level on stderr",
    )
    return parser


def load_yaml_config(path: str | None) -> dict:
    """Load optional settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def _validate_template(template: str) -> str:
    if not isinstance(template, str) or not has_placeholder(template):
        raise ConfigError(f"Template has no placeholders: {template!r}")
    return template


def _parse_presets(value) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigError("'presets' must be a non-empty list of templates")
    return tuple(_validate_template(t) for t in value)


def _parse_timeout(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid connect_timeout: {value!r}")


def _parse_log_level(value: str) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Invalid log level '%s', falling back to WARNING", value)
        return "WARNING"
    return level


def load_config(argv: list[str] | None = None) -> Config:
    """Build Config from defaults <- YAML file <- env vars <- CLI args.

    Raises UsageError for bad arguments and ConfigError for bad settings.
    """
    args = build_parser().parse_args(argv)

    yaml_data = load_yaml_config(args.config or os.environ.get("LOGCLIENT_CONFIG"))

    template = yaml_data.get("format", Config.default_template)
    presets = Config.presets
    if "presets" in yaml_data:
        presets = _parse_presets(yaml_data["presets"])
    timeout = _parse_timeout(yaml_data.get("connect_timeout", Config.connect_timeout))
    log_level = yaml_data.get("log_level", Config.log_level)

    # Env vars override YAML
    template = os.environ.get("LOG_FORMAT", template)
    timeout = _parse_timeout(os.environ.get("LOGCLIENT_CONNECT_TIMEOUT", timeout))
    log_level = os.environ.get("LOGCLIENT_LOG_LEVEL", log_level)

    # CLI flags override env vars
    if args.template is not None:
        template = args.template
    if args.timeout is not None:
        timeout = args.timeout
    if args.verbose:
        log_level = "DEBUG"

    if timeout <= 0:
        raise ConfigError(f"Connect timeout must be positive, got {timeout}")

    return Config(
        host=args.host,
        port=args.port,
        connect_timeout=timeout,
        default_template=_validate_template(template),
        presets=presets,
        log_level=_parse_log_level(log_level),
    )
