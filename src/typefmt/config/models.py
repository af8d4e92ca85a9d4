"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, typefmt.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StyleChoice = Literal["short", "qualified", "full", "repr", "all"]


class NamesConfig(BaseModel):
    """[names] section."""

    model_config = {"frozen": True}

    default_style: StyleChoice = "all"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, gt=0)
