"""
Runtime configuration.

Uses Pydantic for validation, JSON loading and defaults.

Usage:
    config = RivetConfig(scale_factor=3)
    config = RivetConfig.from_file("rivet.json")
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rivet.core.rect import Size


class RivetConfig(BaseModel):
    """Configuration for one running desktop."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    width: int = Field(default=320, gt=0)
    height: int = Field(default=200, gt=0)
    scale_factor: int = Field(default=2, ge=1, le=8)
    target_fps: int = Field(default=30, gt=0)
    log_retention: int = Field(default=200, gt=0)
    font_path: Optional[Path] = None
    start_app: str = "shell"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("start_app")
    @classmethod
    def validate_start_app(cls, v: str) -> str:
        from rivet.apps import APPLICATIONS

        if v not in APPLICATIONS:
            raise ValueError(
                f"Unknown application '{v}'; available: {', '.join(sorted(APPLICATIONS))}"
            )
        return v

    @property
    def screen_size(self) -> Size:
        """Logical screen size in pixels."""
        return Size(self.width, self.height)

    @classmethod
    def from_file(cls, path: Path | str) -> 'RivetConfig':
        """Load configuration from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
