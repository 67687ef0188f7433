"""Configuration parsing and validation for the review turnaround report."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from .errors import AuthenticationError, ConfigurationError

_TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")


@dataclass(frozen=True)
class Config:
    """Validated runtime settings used by the report generator."""

    owner: str
    name: str
    token: str
    delay_seconds: float = 1.0

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.name}"


def split_repository(repository: str) -> Tuple[str, str]:
    """Split an ``owner/name`` identifier into its two parts.

    Raises:
        ConfigurationError: If the identifier is not of the ``owner/name`` form.
    """
    parts = repository.strip().split("/")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise ConfigurationError(
            f"Invalid repository '{repository}': expected the 'owner/name' form."
        )
    return parts[0].strip(), parts[1].strip()


def load_config(repository: str, delay_seconds: float = 1.0) -> Config:
    """Build and validate application configuration.

    Args:
        repository: Target repository in ``owner/name`` form.
        delay_seconds: Pause inserted after each pull request is processed.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If the repository or delay is invalid.
        AuthenticationError: If no GitHub token is configured.
    """
    owner, name = split_repository(repository)

    if delay_seconds < 0:
        raise ConfigurationError(
            "Invalid value for 'delay_seconds': expected a number greater than or equal to 0."
        )

    token = ""
    for env_var in _TOKEN_ENV_VARS:
        token = os.getenv(env_var, "").strip()
        if token:
            break

    if not token:
        raise AuthenticationError(
            "Missing required GitHub token. "
            "Set the 'GITHUB_TOKEN' (or 'GH_TOKEN') environment variable before running the report."
        )

    return Config(owner=owner, name=name, token=token, delay_seconds=delay_seconds)
