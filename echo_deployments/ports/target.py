"""Target port - Interface for a single deployed service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..domain.models import ServiceConfig
from ..domain.value_objects import NamespacedName


@runtime_checkable
class Instance(Protocol):
    """Protocol for a runtime instance of a deployment.

    Instances are opaque to groups; they are only collected and handed
    back to the caller.
    """

    @property
    def instance_id(self) -> str:
        """Unique identifier of the instance."""
        ...


class Target(ABC):
    """Abstract interface for one service deployment in a test topology.

    The surrounding framework provides the concrete implementation. Groups
    depend only on this capability set.
    """

    @abstractmethod
    def config(self) -> ServiceConfig:
        """Naming configuration of the deployment."""
        ...

    @abstractmethod
    def instances(self) -> Sequence[Instance]:
        """Runtime instances backing the deployment, in a stable order."""
        ...

    def namespaced_name(self) -> NamespacedName:
        """Identity of the deployment."""
        return self.config().namespaced_name()

    def cluster_local_fqdn(self) -> str:
        """Cluster-local FQDN of the deployment."""
        return self.config().cluster_local_fqdn()
