# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option specifications from YAML or TOML spec files.

A spec file lists specification strings under `options`:

    # getoptions.yaml
    description: Deploy tool
    options:
      - help|h
      - debug!
      - verbose|v+
      - host=@s

    # getoptions.toml
    options = ["help|h", "debug!", "verbose|v+", "host=@s"]
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from getoptions.exceptions import ConfigError, SpecError
from getoptions.logger import logger
from getoptions.parser.spec_compiler import compile_spec

SPEC_FILE_NAMES = (
    "getoptions.yaml",
    "getoptions.toml",
    ".getoptions.yaml",
    ".getoptions.toml",
)


class SpecFile(BaseModel):
    """Spec file model."""

    description: str = ""
    options: list[str] = Field(min_length=1)

    @field_validator("options")
    @classmethod
    def validate_options(cls, value: list[str]) -> list[str]:
        for spec in value:
            try:
                compile_spec(spec)
            except SpecError as error:
                raise ValueError(str(error)) from error
        return value


def find_spec_file() -> Path | None:
    """Return the first spec file found in the usual locations, if any."""
    candidates = [Path.cwd() / name for name in SPEC_FILE_NAMES]
    env_path = os.environ.get("GETOPTIONS_CONFIG")
    if env_path:
        candidates.append(Path(env_path))
    candidates.extend(
        Path.home() / ".config" / "getoptions" / name for name in SPEC_FILE_NAMES[:2]
    )
    return next((path for path in candidates if path.is_file()), None)


def read_spec_file(file_path: Path | str) -> SpecFile:
    """
    Read and validate a YAML or TOML spec file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        SpecFile: The validated file contents.

    Raises:
        ConfigError: If the file is missing, has an unsupported suffix, cannot
            be parsed, or does not validate.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"Spec file not found: {path}")

    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as f:
            if suffix in (".yaml", ".yml"):
                raw: Any = yaml.safe_load(f)
            elif suffix == ".toml":
                raw = toml.load(f)
            else:
                raise ConfigError(f"Unsupported spec file format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse spec file {path}: {error}") from error

    if not isinstance(raw, dict):
        raise ConfigError(f"Spec file {path} must contain a mapping with 'options'")

    try:
        spec_file = SpecFile.model_validate(raw)
    except ValidationError as error:
        raise ConfigError(f"Invalid spec file {path}: {error}") from error
    logger.debug("Loaded %d specs from %s", len(spec_file.options), path)
    return spec_file


def load_specs(file_path: Path | str) -> list[str]:
    """Return the specification strings listed in a spec file."""
    return read_spec_file(file_path).options
