"""Exceptions raised by the view components."""

from __future__ import annotations


class ViewComponentError(ValueError):
    """Base class for configuration problems detected while rendering."""


class MissingRequiredParameter(ViewComponentError):
    """A required parameter or section was absent or had the wrong shape."""


class InvalidConfiguration(ViewComponentError):
    """A parameter was present but its value cannot be used."""


__all__ = [
    "InvalidConfiguration",
    "MissingRequiredParameter",
    "ViewComponentError",
]
