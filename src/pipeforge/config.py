"""Configuration management for pipeforge.

Settings come from the environment with the PIPEFORGE_ prefix, e.g.

  PIPEFORGE_LOG_LEVEL=DEBUG
  PIPEFORGE_ARRAY_KEYS='{"stock": "name", "stores.stock": "sku"}'
"""

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pipeforge.delta.options import CompareOptions


class PipeforgeConfig(BaseSettings):
    """Pipeforge settings."""

    model_config = SettingsConfigDict(
        env_prefix="PIPEFORGE_",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Log level for pipeforge loggers")

    array_keys: dict[str, str] = Field(
        default_factory=dict,
        description="Array field path -> key column used to match array elements. "
        "Entries apply in order.",
    )

    def compare_options(self) -> CompareOptions:
        """Build CompareOptions from ``array_keys``.

        Raises:
            InvalidCompareOptionError: If an entry has an empty path or key column.
        """
        options = CompareOptions.from_pairs(self.array_keys.items())
        logger.debug(f"Loaded {len(options.array_keys)} array key option(s)")
        return options
