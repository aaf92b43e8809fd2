"""Server configuration loaded from a TOML file."""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ServerConfig:
    """Settings for the HTTP server."""

    host: str = '0.0.0.0'
    port: int = 8080
    debug: bool = False
    log_level: str = 'INFO'
    max_content_length: int = 1024 * 1024

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate the configured values."""
        if not isinstance(self.host, str) or not self.host.strip():
            raise ValueError("'host' must be a non-empty string")

        # bool is a subclass of int and is not a valid port
        if not isinstance(self.port, int) or isinstance(self.port, bool) or not 1 <= self.port <= 65535:
            raise ValueError("'port' must be an integer between 1 and 65535")

        if not isinstance(self.debug, bool):
            raise ValueError("'debug' must be true or false")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"'log_level' must be one of: {', '.join(LOG_LEVELS)}")
        self.log_level = self.log_level.upper()

        if (
            not isinstance(self.max_content_length, int)
            or isinstance(self.max_content_length, bool)
            or self.max_content_length < 1
        ):
            raise ValueError("'max_content_length' must be a positive integer")

    def merged(self, **overrides: Any) -> "ServerConfig":
        """Return a copy with every override that is not None applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ServerConfig(**values)


def default_config_path() -> Path:
    """Location of the user's config file in the platform config directory."""
    return Path(user_config_dir('paracase', 'paracase')) / 'config.toml'


def load_config(path: Optional[Path | str] = None) -> ServerConfig:
    """
    Load server settings from a TOML file.

    The file holds a ``[server]`` table. Without an explicit path the user config
    directory is checked and defaults are used when no file exists there.

    Args:
        path: Path to a TOML config file

    Returns:
        The loaded ServerConfig

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the file is not valid TOML or holds invalid settings
    """
    if path is None:
        path = default_config_path()
        if not path.exists():
            logger.debug(f"No config file at {path}, using defaults")
            return ServerConfig()

    path = Path(path)
    with open(path, 'rb') as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

    server = data.get('server', {})
    if not isinstance(server, dict):
        raise ValueError("'server' must be a table")

    known = {f.name for f in fields(ServerConfig)}
    unknown = sorted(set(server) - known)
    if unknown:
        raise ValueError(f"Unknown server setting(s): {', '.join(unknown)}")

    logger.debug(f"Loaded config from {path}")
    return ServerConfig(**server)
