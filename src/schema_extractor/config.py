"""Loading and validation of the extraction config module."""

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, Field, ValidationError

from schema_extractor.exceptions import ConfigError
from schema_extractor.models.options import ExtractOptions
from schema_extractor.settings import settings

NO_CONFIG_MESSAGE = """
No config file found. Please create one by running:
  schema-extract init

Or manually create '{file_name}' in your project root.
"""

INVALID_CONFIG_MESSAGE = """
Invalid config file. The config module must define:
- bootstrap: function that returns a model registry, model classes or a mapping of models
- output: dict with path and formats

Run 'schema-extract init' to see an example.
"""


class OutputConfig(BaseModel):
    """Where and in which formats rendered schemas are written."""

    path: str = Field(min_length=1, description="Output directory, relative to the working directory")
    formats: List[str] = Field(description="Formats to write")
    file_name: str = Field(default=settings.default_output_file_name, min_length=1, description="Base name of the written files")


class ExtractConfig(BaseModel):
    """Validated contents of a config module."""

    bootstrap: Callable[[], Any]
    output: OutputConfig
    options: ExtractOptions = Field(default_factory=ExtractOptions)

    model_config = {"arbitrary_types_allowed": True}


def find_config(directory: Optional[Path] = None, file_name: Optional[str] = None) -> Optional[Path]:
    """Locate the config module in a directory."""
    candidate = (directory or Path.cwd()) / (file_name or settings.config_file_name)
    return candidate if candidate.is_file() else None


def _import_module(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise ConfigError(INVALID_CONFIG_MESSAGE + f"\nCannot import {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def load_config(path: Optional[Path] = None) -> ExtractConfig:
    """Load and validate the config module.

    Args:
        path: Explicit config path, defaults to the configured file in the working directory

    Returns:
        The validated config

    Raises:
        ConfigError: If the config file is missing, cannot be imported or is invalid
    """
    found = path if path is not None else find_config()
    if found is None or not found.is_file():
        raise ConfigError(NO_CONFIG_MESSAGE.format(file_name=path or settings.config_file_name))

    try:
        module = _import_module(found)
    except ConfigError:
        raise
    except Exception as e:
        raise ConfigError(INVALID_CONFIG_MESSAGE + "\n" + str(e)) from e

    raw_config = {name: getattr(module, name) for name in ("bootstrap", "output", "options") if hasattr(module, name)}
    try:
        return ExtractConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(INVALID_CONFIG_MESSAGE + "\n" + str(e)) from e


def render_template(output_path: Optional[str] = None, file_name: Optional[str] = None) -> str:
    """Config template text with output defaults filled in."""
    template = (Path(__file__).parent / "templates" / "config.template").read_text(encoding="utf-8")
    return template.replace("{output_path}", output_path or settings.default_output_path).replace("{file_name}", file_name or settings.default_output_file_name)
