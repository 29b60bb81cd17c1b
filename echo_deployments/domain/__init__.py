"""Domain layer - Naming of service deployments."""

from .exceptions import ConfigurationError, EchoDeploymentError, InvalidTargetError
from .models import DEFAULT_CLUSTER_DOMAIN, ServiceConfig
from .value_objects import Namespace, NamespacedName, ServiceNameList

__all__ = [
    "DEFAULT_CLUSTER_DOMAIN",
    "ConfigurationError",
    "EchoDeploymentError",
    "InvalidTargetError",
    "Namespace",
    "NamespacedName",
    "ServiceConfig",
    "ServiceNameList",
]
