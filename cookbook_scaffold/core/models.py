"""Domain models for cookbook materialization."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

TEMPLATE_SUFFIX = ".j2"


class CookbookOptions(BaseModel):
    """Resolved values exposed to cookbook templates."""

    model_config = ConfigDict(frozen=True)

    cookbook_name: str = Field(..., min_length=1, description="Cookbook name")
    copyright: str = Field(..., description="Copyright holder")
    email: str = Field(..., description="Maintainer email address")
    license: str = Field(..., description="License identifier")
    readme_format: str = Field(..., description="README format identifier")

    def variables(self) -> dict[str, str]:
        """Return the template variables as a plain mapping."""
        return self.model_dump()


class MaterializeConfig(BaseModel):
    """Configuration for materializing a template tree."""

    template_root: Path = Field(
        ..., description="Directory holding files/ and templates/"
    )
    destination: Path = Field(..., description="Cookbook directory to populate")
    file_mode: int = Field(default=0o644, description="Rendered file permissions")
    template_suffix: str = Field(
        default=TEMPLATE_SUFFIX, description="Suffix stripped from template names"
    )

    @property
    def files_dir(self) -> Path:
        return self.template_root / "files"

    @property
    def templates_dir(self) -> Path:
        return self.template_root / "templates"
