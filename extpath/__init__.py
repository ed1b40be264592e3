"""Host-agnostic path extension rewriting driven by explicit separator dialects."""

from extpath.extension import change_extension
from extpath.host import PathOperations
from extpath.separators import (
    UNIX,
    WINDOWS,
    WINDOWS_UNC,
    EmptyConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
    SeparatorConfig,
    SeparatorConfigError,
    for_current_os,
    get_preset,
)
from extpath.types import ComparisonMode

__version__ = "0.1.0"

__all__ = [
    "UNIX",
    "WINDOWS",
    "WINDOWS_UNC",
    "ComparisonMode",
    "EmptyConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "PathOperations",
    "SeparatorConfig",
    "SeparatorConfigError",
    "__version__",
    "change_extension",
    "for_current_os",
    "get_preset",
]
