"""Exceptions raised by the training engine."""

from __future__ import annotations


class RbmEngineError(Exception):
    """Base class for engine errors."""


class InvalidArgumentError(RbmEngineError, ValueError):
    """A precondition of ``train`` was violated before any epoch ran."""
