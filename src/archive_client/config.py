"""Configuration management for Archive Client."""

import logging
import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Environment variable names
SCOPE_ENV = "ARCHIVE_SCOPE"
BASE_URL_ENV = "ARCHIVE_BASE_URL"
TIMEOUT_ENV = "ARCHIVE_TIMEOUT"

DEFAULT_TIMEOUT = 30.0
MIN_TIMEOUT = 1.0
MAX_TIMEOUT = 300.0


class ArchiveConfigurationError(ValueError):
    """Exception raised when archive configuration is missing or invalid."""

    pass


class ArchiveConfig(BaseModel):
    """Configuration for the archive HTTP endpoint and its token scopes.

    Direct construction raises pydantic ``ValidationError`` on invalid values;
    use ``build_config`` or ``load_config`` to get ``ArchiveConfigurationError``.
    """

    scopes: List[str] = Field(
        ..., description="OAuth scopes requested for every archive call"
    )
    base_url: str = Field(..., description="Base URL of the archive endpoint")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Request timeout in seconds"
    )

    # Route table
    archive_route: str = Field(
        default="archive", description="Route receiving service/method envelopes"
    )
    sync_enterprise_route: str = Field(
        default="syncEnterprise", description="Route for enterprise synchronization"
    )
    sync_private_person_route: str = Field(
        default="syncPrivatePerson",
        description="Route for private person synchronization",
    )

    @field_validator("scopes")
    @classmethod
    def scopes_must_be_urls(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Scopes cannot be empty")
        for scope in v:
            if "https://" not in scope.lower():
                raise ValueError(f"{SCOPE_ENV} must start with 'https://': {scope!r}")
        return v

    @field_validator("base_url")
    @classmethod
    def base_url_must_be_set(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(f"{BASE_URL_ENV} cannot be empty")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"{BASE_URL_ENV} must be an absolute http(s) URL: {v!r}")
        return v

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_in_range(cls, v: float) -> float:
        if not (MIN_TIMEOUT <= v <= MAX_TIMEOUT):
            raise ValueError(
                f"timeout must be between {MIN_TIMEOUT} and {MAX_TIMEOUT} seconds. "
                f"Got: {v}"
            )
        return v


def parse_scopes(raw: Optional[str]) -> List[str]:
    """Split a comma-separated scope string.

    Raises:
        ArchiveConfigurationError: If the value is missing or empty
    """
    if raw is None:
        raise ArchiveConfigurationError(f"{SCOPE_ENV} cannot be null")
    if not raw.strip():
        raise ArchiveConfigurationError("Scopes cannot be empty")
    return [scope.strip() for scope in raw.split(",")]


def build_config(**values) -> ArchiveConfig:
    """Construct an ArchiveConfig, reporting failures as ArchiveConfigurationError."""
    try:
        return ArchiveConfig(**values)
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        raise ArchiveConfigurationError(
            f"Invalid archive configuration: {messages}"
        ) from e


def load_config(environ: Optional[Mapping[str, str]] = None) -> ArchiveConfig:
    """Load configuration from environment variables.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        Validated ArchiveConfig

    Raises:
        ArchiveConfigurationError: If a required variable is missing or invalid

    Environment Variables:
        ARCHIVE_SCOPE: Comma-separated scopes, each containing https://
        ARCHIVE_BASE_URL: Base URL of the archive endpoint
        ARCHIVE_TIMEOUT: Request timeout in seconds (optional, default: 30)
    """
    env = os.environ if environ is None else environ

    scopes = parse_scopes(env.get(SCOPE_ENV))

    base_url = env.get(BASE_URL_ENV)
    if base_url is None:
        raise ArchiveConfigurationError(f"{BASE_URL_ENV} cannot be null")

    values = {"scopes": scopes, "base_url": base_url}

    raw_timeout = env.get(TIMEOUT_ENV)
    if raw_timeout:
        try:
            values["timeout"] = float(raw_timeout)
        except ValueError as e:
            raise ArchiveConfigurationError(
                f"{TIMEOUT_ENV} must be a number of seconds. Got: {raw_timeout!r}"
            ) from e

    config = build_config(**values)
    logger.debug(
        f"Loaded archive configuration for {config.base_url} "
        f"with {len(config.scopes)} scope(s)"
    )
    return config
