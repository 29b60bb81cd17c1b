"""Infrastructure layer - Concrete implementations of ports."""

from .config import EchoFrameworkConfig
from .simple_logger import SimpleLogger
from .static_target import StaticInstance, StaticTarget

__all__ = ["EchoFrameworkConfig", "SimpleLogger", "StaticInstance", "StaticTarget"]
