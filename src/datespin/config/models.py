"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, datespin.toml only contains overrides.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from datespin.domain.patterns import DEFAULT_PATTERN
from datespin.domain.units import StepUnit, coerce_unit


class SpinnerConfig(BaseModel):
    """[spinner] section."""

    model_config = {"frozen": True}

    pattern: str = DEFAULT_PATTERN
    unit: StepUnit = StepUnit.DAYS
    minimum: datetime | None = None
    maximum: datetime | None = None

    @field_validator("unit", mode="before")
    @classmethod
    def _coerce_unit(cls, value: object) -> object:
        if isinstance(value, str):
            return coerce_unit(value)
        return value

    @field_validator("minimum", "maximum")
    @classmethod
    def _drop_offset(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.replace(tzinfo=None)
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class DatespinConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    spinner: SpinnerConfig = Field(default_factory=SpinnerConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
