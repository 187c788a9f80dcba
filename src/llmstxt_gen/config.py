"""Application configuration: settings schema and llmstxt.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from llmstxt_gen.core.format import default_format_options
from llmstxt_gen.core.models import FormatOptions
from llmstxt_gen.errors import ConfigError


CONFIG_FILE = "llmstxt.yaml"
ENV_PREFIX = "LLMSTXT_"


class Settings(BaseModel):
    project_name:      str = Field(default="Documentation", description="Project name used in the H1 title")
    input_dir:         str = Field(default="./pages",       description="Directory containing MD/MDX sources")
    output_file:       str = Field(default="./llms.txt",    description="Destination of the rendered document")
    sitemap:           Optional[str] = Field(default=None,  description="Sitemap XML used to select and order files")
    summary:           Optional[str] = Field(default=None,  description="Override for the blockquote summary")
    general_info:      Optional[str] = Field(default=None,  description="Override for the first info paragraph")
    organization_info: Optional[str] = Field(default=None,  description="Override for the second info paragraph")
    extensions:        list[str] = Field(default=[".md", ".mdx"], min_length=1, description="Source file suffixes")
    verbose:           bool = False

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: Any) -> Any:
        """Accept 'md,mdx' strings (env vars) and add missing leading dots."""
        if isinstance(value, str):
            value = [v for v in value.split(",") if v.strip()]
        if isinstance(value, list):
            return [v.strip() if v.strip().startswith(".") else f".{v.strip()}" for v in value]
        return value

    def format_options(self) -> FormatOptions:
        """Default header strings for project_name with configured overrides applied."""
        defaults = default_format_options(self.project_name)
        overrides = {
            "summary": self.summary,
            "general_info": self.general_info,
            "organization_info": self.organization_info,
        }
        return defaults.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from llmstxt.yaml, then LLMSTXT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
