# stubkit/core/options.py
"""
Stub runner options relevant to repository discovery.

Only consumer scoping lives here: when ``stubs_per_consumer`` is enabled,
discovery is restricted to files stored under a directory literally named
after ``consumer_name``.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ENV_STUBS_PER_CONSUMER = "STUBRUNNER_STUBS_PER_CONSUMER"
ENV_CONSUMER_NAME = "STUBRUNNER_CONSUMER_NAME"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class StubRunnerOptions(BaseModel):
    """
    Consumer scoping configuration.

    Example YAML:
        stubrunner:
          stubs_per_consumer: true
          consumer_name: billing-service
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    stubs_per_consumer: bool = Field(
        default=False,
        description="Only pick up stubs stored under a directory named after the consumer",
    )
    consumer_name: Optional[str] = Field(
        default=None,
        description="Consumer directory name used when stubs_per_consumer is enabled",
    )

    @field_validator("consumer_name")
    @classmethod
    def _validate_consumer_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        if "/" in v or "\\" in v:
            raise ValueError(f"consumer_name must be a single directory name, got {v!r}")
        return v

    @model_validator(mode="after")
    def _require_consumer_name(self) -> "StubRunnerOptions":
        if self.stubs_per_consumer and not self.consumer_name:
            raise ValueError("consumer_name is required when stubs_per_consumer is enabled")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StubRunnerOptions":
        """Build options from STUBRUNNER_* environment variables."""
        env = os.environ if environ is None else environ
        flag = env.get(ENV_STUBS_PER_CONSUMER, "").strip().lower() in _TRUE_VALUES
        return cls(
            stubs_per_consumer=flag,
            consumer_name=env.get(ENV_CONSUMER_NAME),
        )


__all__ = [
    "StubRunnerOptions",
    "ENV_STUBS_PER_CONSUMER",
    "ENV_CONSUMER_NAME",
]
