"""Exception types raised across prompt-gen boundaries."""

from __future__ import annotations


class PromptGenError(Exception):
    """Base class for fatal prompt-gen failures."""


class SourceTreeError(PromptGenError):
    """Traversal root is missing or is not a directory."""


class ConfigError(PromptGenError):
    """Project configuration could not be created or persisted."""


__all__ = [
    "PromptGenError",
    "SourceTreeError",
    "ConfigError",
]
