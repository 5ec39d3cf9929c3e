"""Analyzer settings, loadable from a YAML file."""
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .report.render import resolve_timezone


class AnalyzerConfig(BaseModel):
    """How input is read and how the report is rendered.

    missing_files: "skip" logs unreadable files and carries on, "halt" stops the run.
    invalid_numbers: "skip" drops lines with unparsable numbers, "zero" reads them as 0.
    """
    timezone: str = "UTC"
    missing_files: Literal["skip", "halt"] = "skip"
    invalid_numbers: Literal["skip", "zero"] = "skip"
    max_regions: Optional[int] = Field(default=None, ge=1)
    show_pressure: bool = False
    encoding: str = "utf-8"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        resolve_timezone(value)
        return value


def load_config(path: Union[str, Path, None] = None, **overrides) -> AnalyzerConfig:
    """Build an AnalyzerConfig from an optional YAML file plus overrides.

    Overrides whose value is None are ignored so unset CLI flags keep the
    file's value.

    Raises:
        ConfigError: If the file cannot be read or a value is invalid
    """
    data = {}
    if path is not None:
        try:
            loaded = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read config {path}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"config {path} must be a mapping")
        data.update(loaded)
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return AnalyzerConfig(**data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
