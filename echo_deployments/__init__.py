"""
echo-deployments - Grouping and ordering of service deployments.

Helpers for integration tests that run against many deployed services:
group them, look them up, project their names and FQDNs, and iterate
over them in a deterministic order.
"""

__version__ = "0.1.0"

from .application.service_group import ServiceGroup
from .domain.models import ServiceConfig
from .domain.value_objects import Namespace, NamespacedName, ServiceNameList
from .ports.target import Instance, Target

__all__ = [
    "Instance",
    "Namespace",
    "NamespacedName",
    "ServiceConfig",
    "ServiceGroup",
    "ServiceNameList",
    "Target",
]
