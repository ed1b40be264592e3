"""Extension rewriting over a single backward scan of the path text.

Only the final path segment may contribute the extension dot. Scanning from
the right, the nearest recognized separator is always reached after a dot in
the final segment has either been found or ruled out, so one pass suffices.
"""

from __future__ import annotations

from enum import Enum

from extpath.separators import MissingConfigurationError, SeparatorConfig


class _ScanState(Enum):
    SCANNING = 0
    FOUND_DOT = 1
    HIT_BOUNDARY = 2


def _find_cut_index(path: str, config: SeparatorConfig) -> int:
    """Return the index where the extension starts, or ``len(path)`` if none."""
    cut = len(path)
    state = _ScanState.SCANNING
    i = len(path) - 1
    while state is _ScanState.SCANNING and i >= 0:
        ch = path[i]
        if ch == ".":
            cut = i
            state = _ScanState.FOUND_DOT
        elif config.is_directory_separator(ch):
            state = _ScanState.HIT_BOUNDARY
        i -= 1
    return cut


def change_extension(
    path: str | None,
    new_extension: str | None,
    config: SeparatorConfig,
) -> str | None:
    """Replace or remove the extension of *path* under a separator dialect.

    Mirrors ``System.IO.Path.ChangeExtension`` semantics, except that only
    the separators recognized by *config* end the final segment.

    Args:
        path: Path text to rewrite. ``None`` yields ``None``; ``""`` yields ``""``.
        new_extension: Replacement extension, with or without a leading dot.
            ``None`` strips the extension. An empty string leaves a trailing
            dot, matching the legacy behavior.
        config: Dialect deciding which characters are separators.

    Returns:
        The rewritten path, or ``None`` when *path* is ``None``.

    Raises:
        MissingConfigurationError: If *config* is ``None``.
    """
    if config is None:
        raise MissingConfigurationError("config")
    if path is None:
        return None
    if not path:
        return ""

    stem = path[: _find_cut_index(path, config)]
    if new_extension is None:
        return stem
    if new_extension.startswith("."):
        return stem + new_extension
    return stem + "." + new_extension
