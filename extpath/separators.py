"""Separator dialects: which characters delimit path segments, and presets."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import field

from extpath.types import ComparisonMode, frozen_slots

logger = logging.getLogger(__name__)


class SeparatorConfigError(ValueError):
    """Base class for misconfigured separator dialects."""


class EmptyConfigurationError(SeparatorConfigError):
    """Raised when a dialect recognizes no separators at all."""

    def __init__(self, field: str) -> None:
        super().__init__(f"'{field}' must contain at least one separator")
        self.field = field


class InvalidConfigurationError(SeparatorConfigError):
    """Raised when a dialect field holds a value that breaks its invariants."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"'{field}' {message}")
        self.field = field


class MissingConfigurationError(SeparatorConfigError, TypeError):
    """Raised when an operation is called without a separator dialect."""

    def __init__(self, name: str = "config") -> None:
        super().__init__(f"'{name}' must be a SeparatorConfig, got None")
        self.field = name


def _is_char(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1


@frozen_slots
class SeparatorConfig:
    """Separator and rooting rules for one path dialect.

    Only ``recognized_separators`` drives the extension rewriter. The
    capability and normalization flags are carried for operations that
    consult them; nothing in this package interprets them yet.
    """

    recognized_separators: tuple[str, ...] = field(compare=False)
    preferred_separator: str
    volume_separator: str | None = None
    supports_drive_letters: bool = False
    supports_unc_paths: bool = False
    supports_device_paths: bool = False
    case_sensitive: bool = True
    collapse_separator_runs: bool = True
    preserve_separators_after_root: bool = True
    trim_trailing_separators_except_root: bool = True
    # Equality and hashing go through membership only; order and duplicates
    # in recognized_separators are kept for diagnostics.
    separator_set: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        separators = tuple(self.recognized_separators)
        if not separators:
            raise EmptyConfigurationError("recognized_separators")
        for sep in separators:
            if not _is_char(sep):
                raise InvalidConfigurationError(
                    "recognized_separators",
                    f"must hold single characters, got {sep!r}",
                )
        if not _is_char(self.preferred_separator):
            raise InvalidConfigurationError(
                "preferred_separator",
                f"must be a single character, got {self.preferred_separator!r}",
            )
        if self.volume_separator is not None and not _is_char(self.volume_separator):
            raise InvalidConfigurationError(
                "volume_separator",
                f"must be a single character or None, got {self.volume_separator!r}",
            )
        if self.preferred_separator not in separators:
            raise InvalidConfigurationError(
                "recognized_separators",
                f"must contain the preferred separator {self.preferred_separator!r}",
            )
        object.__setattr__(self, "recognized_separators", separators)
        object.__setattr__(self, "separator_set", frozenset(separators))

    @property
    def comparison_mode(self) -> ComparisonMode:
        """Ordinal for case-sensitive dialects, ordinal-ignore-case otherwise."""
        if self.case_sensitive:
            return ComparisonMode.ORDINAL
        return ComparisonMode.ORDINAL_IGNORE_CASE

    def is_directory_separator(self, c: str) -> bool:
        """Return True if *c* delimits path segments in this dialect."""
        return c in self.separator_set


WINDOWS = SeparatorConfig(
    recognized_separators=("\\", "/"),
    preferred_separator="\\",
    volume_separator=":",
    supports_drive_letters=True,
    supports_unc_paths=True,
    supports_device_paths=True,
    case_sensitive=False,
)

UNIX = SeparatorConfig(
    recognized_separators=("/",),
    preferred_separator="/",
    case_sensitive=True,
)

# Windows UNC semantics usable from any host. Not suitable for device UNC
# paths such as "\\?\UNC\server\share".
WINDOWS_UNC = SeparatorConfig(
    recognized_separators=("\\", "/"),
    preferred_separator="\\",
    supports_unc_paths=True,
    case_sensitive=False,
)


def for_current_os(platform: str | None = None) -> SeparatorConfig:
    """Return the WINDOWS or UNIX preset matching *platform* (default: this host)."""
    if platform is None:
        platform = sys.platform
    return WINDOWS if platform == "win32" else UNIX


_PRESETS: dict[str, SeparatorConfig] = {
    "windows": WINDOWS,
    "unix": UNIX,
    "windows-unc": WINDOWS_UNC,
}

PRESET_NAMES: tuple[str, ...] = (*_PRESETS, "current")


def get_preset(name: str) -> SeparatorConfig:
    """Resolve a dialect name (see ``PRESET_NAMES``) to its shared preset."""
    key = name.lower()
    if key == "current":
        preset = for_current_os()
        logger.debug("Dialect 'current' resolved for platform %s", sys.platform)
        return preset
    try:
        return _PRESETS[key]
    except KeyError:
        raise InvalidConfigurationError(
            "dialect",
            f"must be one of {', '.join(PRESET_NAMES)}, got {name!r}",
        ) from None


def separators_from(chars: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate *chars* while keeping first-seen order."""
    return tuple(dict.fromkeys(chars))


def preset_name(config: SeparatorConfig) -> str | None:
    """Return the name of the shared preset *config* is, or None for a custom dialect."""
    for name, preset in _PRESETS.items():
        if config is preset:
            return name
    return None
