"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``scssimporter.toml`` only
contains overrides. A project needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from scssimporter.infrastructure.workspace import DEFAULT_TMP_DIR


class ResolverConfig(BaseModel):
    """[resolver] section."""

    model_config = {"frozen": True}

    # Relative paths are taken from the project root.
    tmp_dir: Path = DEFAULT_TMP_DIR
    package_dirs: list[Path] = Field(default_factory=list)

