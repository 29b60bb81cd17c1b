"""Domain models describing how a service deployment is named."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .value_objects import Namespace, NamespacedName, validate_dns_label

DEFAULT_CLUSTER_DOMAIN = "cluster.local"


def normalize_domain(value: str) -> str:
    """Lowercase a cluster DNS domain and validate each of its labels."""
    value = value.lower()
    for label in value.split("."):
        validate_dns_label(label, "domain label")
    return value


class ServiceConfig(BaseModel):
    """Naming configuration of a single service deployment.

    Holds the short service name, the namespace it is deployed into and
    the DNS domain of the cluster. Everything a group needs to identify
    and order a deployment is derived from these three fields.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid", str_strip_whitespace=True)

    service: str = Field(..., min_length=1, max_length=63, description="Short service name")
    namespace: Namespace = Field(..., description="Namespace the service is deployed into")
    domain: str = Field(
        default=DEFAULT_CLUSTER_DOMAIN,
        min_length=1,
        description="Cluster DNS domain",
    )

    @field_validator("service")
    @classmethod
    def validate_service(cls, v: str) -> str:
        """Validate service name format."""
        return validate_dns_label(v, "service name")

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Normalize the cluster domain."""
        return normalize_domain(v)

    def cluster_local_fqdn(self) -> str:
        """Fully-qualified name of the service inside its cluster."""
        return f"{self.service}.{self.namespace.name}.svc.{self.domain}"

    def namespaced_name(self) -> NamespacedName:
        """Identity of the service using the full namespace name."""
        return NamespacedName(name=self.service, namespace=self.namespace.name)

    def namespaced_name_with_prefix(self) -> NamespacedName:
        """Identity of the service using the namespace prefix, for test names and logs."""
        return NamespacedName(name=self.service, namespace=self.namespace.prefix)
