"""User configuration for the treewalk command line."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from treewalk.exceptions import ConfigValidationError
from treewalk.exceptions import ConfigVersionError

logger = logging.getLogger(__name__)

CONFIG_VERSION = 1


@dataclass
class WalkerConfig:
    """Defaults applied when the matching CLI option is not given."""

    version: int = CONFIG_VERSION
    max_concurrency: int | None = None  # None means unbounded fan-out
    sequential: bool = False
    sort_entries: bool = False

    @classmethod
    def default_path(cls) -> Path:
        """Get default config location using platformdirs."""
        return user_config_path("treewalk") / "config.json"

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Config must be a JSON object")
        if "version" not in data:
            raise ConfigValidationError("Config missing 'version' key")

        version = data["version"]
        if not isinstance(version, int):
            raise ConfigValidationError(f"Config version must be an integer: {version!r}")
        if version > CONFIG_VERSION:
            raise ConfigVersionError(
                f"Config version {version} is newer than supported version {CONFIG_VERSION}"
            )

        max_concurrency = data.get("max_concurrency")
        if max_concurrency is not None and (
            not isinstance(max_concurrency, int)
            or isinstance(max_concurrency, bool)
            or max_concurrency < 1
        ):
            raise ConfigValidationError(
                f"'max_concurrency' must be a positive integer or null: {max_concurrency!r}"
            )

        for key in ("sequential", "sort_entries"):
            if not isinstance(data.get(key, False), bool):
                raise ConfigValidationError(f"'{key}' must be true or false")

        return cls(
            version=version,
            max_concurrency=max_concurrency,
            sequential=data.get("sequential", False),
            sort_entries=data.get("sort_entries", False),
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load config from JSON file. Returns defaults if it doesn't exist.

        Args:
            path: Path to config file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            logger.debug("No config at %s, using defaults", path)
            return cls()

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in config {path}: {e}") from e

        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data)
