"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, white-label.toml only contains
overrides and the ``[constants]`` table.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from white_label.domain.types import Target


class BuildConfig(BaseModel):
    """[build] section."""

    model_config = {"frozen": True}

    format: Target = Target.PYTHON
    output: str = "brand_constants.py"


class WhiteLabelConfig(BaseModel):
    """Root manifest schema.

    ``constants`` maps each generated constant name to its clause text, in
    file order.
    """

    model_config = {"frozen": True}

    build: BuildConfig = Field(default_factory=BuildConfig)
    constants: dict[str, str] = Field(default_factory=dict)
