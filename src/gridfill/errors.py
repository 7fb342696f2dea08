from __future__ import annotations


class GridFillError(Exception):
    pass


class ResourceError(GridFillError):
    """Scratch table could not be acquired or released while building templates."""


class MalformedInputError(GridFillError, ValueError):
    """Delimited text violates the quoting rules."""
