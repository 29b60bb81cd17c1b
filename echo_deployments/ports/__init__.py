"""Ports layer - Interfaces the test framework implements."""

from .logger import LoggerPort
from .target import Instance, Target

__all__ = ["Instance", "LoggerPort", "Target"]
