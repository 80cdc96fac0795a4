"""Configuration loading and validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

SORT_KEY_PATTERN = r"^(title|year|box)-(asc|desc)$"


class DatasetConfig(BaseModel):
    """Where the film dataset is loaded from."""

    source: str = Field(default="films.json", description="Local JSON path or http(s) URL")
    timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        """Reject blank sources."""
        if not v.strip():
            msg = "dataset source must not be empty"
            raise ValueError(msg)
        return v.strip()


class ViewConfig(BaseModel):
    """Table and chart view defaults."""

    default_sort: str = Field(default="box-desc", pattern=SORT_KEY_PATTERN)
    top_directors: int = Field(default=5, ge=1, le=50)


class ReportConfig(BaseModel):
    """Static site configuration section."""

    title: str = "Highest-Grossing Films"
    output_dir: Path = Field(default=Path("./site"))


class Config(BaseModel):
    """Root configuration model."""

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)


def load_config(path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValidationError: If the config is invalid.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    return Config.model_validate(raw_config or {})
