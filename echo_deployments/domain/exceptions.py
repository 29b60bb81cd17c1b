"""Domain-specific exceptions for echo deployment groups."""

from typing import Any


class EchoDeploymentError(Exception):
    """Base exception for all echo deployment errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidTargetError(EchoDeploymentError):
    """Raised when a group member does not implement the Target capability set."""

    def __init__(self, value: Any, position: int | None = None):
        super().__init__(
            f"Expected a Target, got {type(value).__name__}",
            details={"type": type(value).__name__},
        )
        self.value = value
        self.position = position
        if position is not None:
            self.details["position"] = position


class ConfigurationError(EchoDeploymentError):
    """Raised when framework configuration cannot be loaded."""

    def __init__(self, message: str, variable: str | None = None):
        super().__init__(message)
        self.variable = variable
        if variable:
            self.details["variable"] = variable
