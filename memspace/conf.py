import json
import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class SpaceConfig(BaseModel):
    """
    SpaceConfig defines the parameters of a simulated memory space.

    Attributes:
        max_size (int): Number of addressable units; the space covers [0, max_size).
        strict_free (bool): Raise NotFoundError when freeing an address that was never
            allocated instead of ignoring the request.
        log_level (str): Logging level name used by the command line driver.

    Example:
        >>> config = SpaceConfig(max_size=100)
        >>> config.strict_free
        False
    """

    max_size: int = Field(
        gt=0,
        title="Maximum Size",
        description="Size of the managed address space",
    )
    strict_free: bool = Field(
        default=False,
        title="Strict Free",
        description="Raise an error when freeing an unknown address",
    )
    log_level: str = Field(
        default="WARNING",
        title="Log Level",
        description="Name of the logging level, such as DEBUG or INFO",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SpaceConfig":
        """
        Load a configuration from a JSON file.

        Args:
            path (Union[str, Path]): Location of the JSON document.

        Returns:
            SpaceConfig: The validated configuration.
        """
        path = Path(path)
        logger.debug(f"Loading space configuration from {path}")
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)
