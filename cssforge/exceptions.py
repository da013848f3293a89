"""Exception hierarchy for cssforge."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssforge.types import SelectorCategory


class CssForgeError(Exception):
    """Base exception for all cssforge errors."""


class SelectorError(CssForgeError):
    """Raised when a selector is assembled incorrectly."""

    def __init__(self, message: str, category: SelectorCategory) -> None:
        super().__init__(message)
        self.category = category


class DuplicateCategoryError(SelectorError):
    """Raised when element, id or pseudo-element is added twice."""


class OrderViolationError(SelectorError):
    """Raised when selector parts are added out of order."""


class SerializationError(CssForgeError):
    """Raised when JSON encoding or decoding fails."""


class ConfigError(CssForgeError):
    """Raised when configuration is invalid."""
