import os
from typing import FrozenSet, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import (
    DEFAULT_REDACTED_HEADERS,
    ENV_LOG_BODIES,
    ENV_MAX_WORKERS,
)

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings for a NetworkManager.

    Attributes:
        log_bodies: Log request and response bodies at DEBUG level. Off by
            default since bodies may carry credentials or personal data.
        max_workers: Size of the worker pool used by completion-style calls.
            ``None`` lets ``ThreadPoolExecutor`` pick its default.
        redacted_headers: Header names (case-insensitive) whose values are
            masked in log records.
    """

    model_config = ConfigDict(frozen=True)

    log_bodies: bool = False
    max_workers: Optional[int] = Field(default=None, gt=0)
    redacted_headers: FrozenSet[str] = DEFAULT_REDACTED_HEADERS

    @field_validator("redacted_headers", mode="after")
    @classmethod
    def normalize_headers(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(name.lower() for name in value)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Config":
        """Build a Config from ``NETWORK_MANAGER_*`` environment variables.

        Args:
            dotenv: Load a ``.env`` file from the working directory first.
                Variables already set in the environment win.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        max_workers = os.getenv(ENV_MAX_WORKERS)
        return cls(
            log_bodies=os.getenv(ENV_LOG_BODIES, "").strip().lower() in _TRUTHY,
            max_workers=max_workers or None,
        )
