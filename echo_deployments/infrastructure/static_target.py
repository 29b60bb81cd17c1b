"""In-memory Target implementation for fixtures and tests."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import ServiceConfig
from ..ports.target import Target


class StaticInstance(BaseModel):
    """A runtime instance that was provisioned up front."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
    )

    instance_id: str = Field(..., min_length=1, description="Unique instance identifier")
    cluster: str = Field(default="primary", min_length=1, description="Owning cluster")
    address: str | None = Field(default=None, description="Pod or workload address")


class StaticTarget(Target):
    """Target whose config and instances are fixed at construction."""

    def __init__(self, config: ServiceConfig, instances: Iterable[StaticInstance] = ()):
        self._config = config
        self._instances = tuple(instances)

    def config(self) -> ServiceConfig:
        return self._config

    def instances(self) -> Sequence[StaticInstance]:
        return self._instances

    def __repr__(self) -> str:
        return f"StaticTarget({self.cluster_local_fqdn()!r}, instances={len(self._instances)})"
