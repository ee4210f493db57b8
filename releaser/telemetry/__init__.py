"""Telemetry and observability helpers.

This package emits deterministic event lines for auditing name resolution.
"""

from .logger import EventLogger

__all__ = ["EventLogger"]
