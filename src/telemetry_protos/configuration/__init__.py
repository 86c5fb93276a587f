"""Configuration domain exports."""

from .build_settings import BuildSettings
from .loader import (
    OUTPUT_DIR_ENV_VAR,
    ConfigurationError,
    load_build_settings,
    resolve_output_location,
)

__all__ = [
    "BuildSettings",
    "ConfigurationError",
    "OUTPUT_DIR_ENV_VAR",
    "load_build_settings",
    "resolve_output_location",
]
