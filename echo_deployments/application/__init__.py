"""Application layer - Grouping and ordering of deployments."""

from .service_group import ServiceGroup

__all__ = ["ServiceGroup"]
