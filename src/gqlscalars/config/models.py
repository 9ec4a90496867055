"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gqlscalars.toml only contains
overrides.  An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- gqlscalars.toml sections ---


class InputConfig(BaseModel):
    """[input] section.

    ``format`` controls how the CLI decodes VALUE arguments: ``json`` decodes
    them as JSON (falling back to the raw text), ``text`` passes raw text.
    """

    model_config = {"frozen": True}

    format: Literal["json", "text"] = "json"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)

