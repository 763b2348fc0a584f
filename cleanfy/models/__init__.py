"""Data models: name parts, transform configuration and rename results."""

from cleanfy.models.name_parts import NameParts, split_name
from cleanfy.models.rename_result import RenameResult
from cleanfy.models.transform_config import CaseMode, DateMode, DateStyle, TransformConfig

__all__ = [
    "CaseMode",
    "DateMode",
    "DateStyle",
    "NameParts",
    "RenameResult",
    "TransformConfig",
    "split_name",
]
