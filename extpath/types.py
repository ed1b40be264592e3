"""Shared type definitions and utilities for extpath."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Reusable decorator for immutable, slot-based dataclasses.
frozen_slots = dataclass(frozen=True, slots=True)

# Semantic alias for CLI positional path arguments.
Paths = tuple[str, ...]


class ComparisonMode(Enum):
    """How path text should be compared under a dialect."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal-ignore-case"
