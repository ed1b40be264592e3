"""Path operations bound to one separator dialect."""

from __future__ import annotations

from extpath.extension import change_extension
from extpath.separators import MissingConfigurationError, SeparatorConfig


class PathOperations:
    """Instance-method front end for the module-level path functions.

    Holds a single :class:`SeparatorConfig` for its lifetime and forwards
    every call to the free function with that dialect.
    """

    __slots__ = ("_config",)

    def __init__(self, config: SeparatorConfig) -> None:
        if config is None:
            raise MissingConfigurationError("config")
        self._config = config

    @property
    def config(self) -> SeparatorConfig:
        return self._config

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathOperations):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    def __repr__(self) -> str:
        return f"PathOperations({self._config!r})"

    def change_extension(self, path: str | None, new_extension: str | None) -> str | None:
        """See :func:`extpath.extension.change_extension`."""
        return change_extension(path, new_extension, self._config)
