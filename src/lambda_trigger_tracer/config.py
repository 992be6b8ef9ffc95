"""Configuration for the trigger tracer.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Nothing here is read at import time; the builder loads settings when it is
constructed without explicit ones.
"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lambda_trigger_tracer.logging import configure_logging
from lambda_trigger_tracer.metadata import DEFAULT_MAX_PAYLOAD_LENGTH, MetadataPolicy


class TracerSettings(BaseSettings):
    """Settings for trigger extraction.

    Environment variables:
    - TRACER_METADATA_ONLY       (optional)
    - TRACER_MAX_PAYLOAD_LENGTH  (optional)
    - LOG_LEVEL                  (optional)
    - TRACER_DEBUG               (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `TracerSettings(_env_file=path_to_env)`.
    """

    metadata_only: bool = Field(
        default=False,
        validation_alias="TRACER_METADATA_ONLY",
        description="Drop payload metadata (bodies, headers, attributes) and keep identifiers only",
    )
    max_payload_length: int = Field(
        default=DEFAULT_MAX_PAYLOAD_LENGTH,
        gt=0,
        validation_alias="TRACER_MAX_PAYLOAD_LENGTH",
        description="Maximum length of a single payload string before it is truncated",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    debug: bool = Field(
        default=False,
        validation_alias="TRACER_DEBUG",
        description="Enable debug logging for the tracer package",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def metadata_policy(self) -> MetadataPolicy:
        """Policy applied by the metadata normalizer."""

        return MetadataPolicy(
            metadata_only=self.metadata_only,
            max_payload_length=self.max_payload_length,
        )

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        configure_logging(self.log_level)

        if self.debug:
            logging.getLogger("lambda_trigger_tracer").setLevel(logging.DEBUG)
