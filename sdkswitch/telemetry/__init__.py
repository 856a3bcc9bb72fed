"""Telemetry and observability helpers.

This package emits operation events for deterministic auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
