"""Shared typed data models for releaser.

This package contains dataclasses used across text modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import WordPosition

__all__ = ["WordPosition"]
