"""
Exceptions raised by the path searches.
"""
from __future__ import annotations
from typing import Hashable


class PathfindingError(Exception):
    """Base exception for the package."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TargetUnreachableError(PathfindingError):
    """Raised when a search exhausts its frontier without connecting source and target."""
    def __init__(self, source: Hashable, target: Hashable, message: str | None = None):
        self.source = source
        self.target = target
        super().__init__(message or f"Target {target!r} is not reachable from source {source!r}.")
