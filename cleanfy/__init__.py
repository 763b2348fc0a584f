"""cleanfy: batch filename normalizer.

Turns file and directory names into portable, POSIX-safe ASCII names.

Core entry points:
    clean_name(full_path, name, is_dir, config) -> str
    resolve(directory, desired_name, exists=None) -> Resolution
"""

from importlib.metadata import PackageNotFoundError, version

from cleanfy.config import APP_NAME, APP_VERSION
from cleanfy.core.conflict_resolver import Resolution, resolve
from cleanfy.core.errors import (
    CleanfyError,
    ConfigError,
    DestinationExistsError,
    EmptyResultError,
    MetadataReadError,
)
from cleanfy.core.name_pipeline import NamePipeline, clean_name
from cleanfy.models.transform_config import CaseMode, DateMode, DateStyle, TransformConfig


def get_version() -> str:
    """Installed distribution version, or the configured one for a source checkout."""
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        return APP_VERSION


__version__ = get_version()

__all__ = [
    "CaseMode",
    "CleanfyError",
    "ConfigError",
    "DateMode",
    "DateStyle",
    "DestinationExistsError",
    "EmptyResultError",
    "MetadataReadError",
    "NamePipeline",
    "Resolution",
    "TransformConfig",
    "__version__",
    "clean_name",
    "get_version",
    "resolve",
]
