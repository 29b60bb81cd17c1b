"""Domain value objects for naming service deployments.

These value objects give the namespace and identity of a deployment a
validated, hashable form so they can be compared and used as keys.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# RFC 1123 label, the format Kubernetes requires for service and namespace names
DNS_LABEL_PATTERN = r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$"


def validate_dns_label(value: str, kind: str) -> str:
    """Validate that a value is a lowercase RFC 1123 label.

    Args:
        value: The value to validate
        kind: Human-readable name of the value, used in the error message

    Returns:
        The validated value
    """
    if not re.fullmatch(DNS_LABEL_PATTERN, value):
        raise ValueError(
            f"Invalid {kind} '{value}'. Must consist of lowercase letters, numbers "
            "and hyphens, and start and end with a letter or number."
        )
    return value


class Namespace(BaseModel):
    """Value object representing a test namespace.

    Test namespaces are usually generated from a short prefix plus a unique
    suffix (for example ``echo-1-84631`` from ``echo``). The prefix is kept
    alongside the full name so generated test names and logs stay readable.
    """

    model_config = ConfigDict(frozen=True, strict=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=63, description="Full namespace name")
    prefix: str = Field(default="", max_length=63, description="Short display form")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate namespace name format."""
        return validate_dns_label(v, "namespace name")

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Validate namespace prefix format."""
        return validate_dns_label(v, "namespace prefix")

    @model_validator(mode="before")
    @classmethod
    def default_prefix(cls, data: Any) -> Any:
        """Fall back to the full name when no prefix was given."""
        if isinstance(data, dict) and not data.get("prefix"):
            return {**data, "prefix": data.get("name", "")}
        return data

    def __str__(self) -> str:
        """String representation returns the full name."""
        return self.name


class NamespacedName(BaseModel):
    """Identity pair of a service name and a namespace.

    Independent of how the cluster-local FQDN is formatted, which makes it
    a stable key across clusters and domains.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(..., min_length=1, description="Service name")
    namespace: str = Field(..., min_length=1, description="Namespace name or prefix")

    def __str__(self) -> str:
        """Dotted ``name.namespace`` form."""
        return f"{self.name}.{self.namespace}"

    def __eq__(self, other: Any) -> bool:
        """Equality comparison."""
        if isinstance(other, NamespacedName):
            return self.name == other.name and self.namespace == other.namespace
        return False

    def __hash__(self) -> int:
        """Make hashable for use in sets and dicts."""
        return hash((self.name, self.namespace))


class ServiceNameList(tuple[NamespacedName, ...]):
    """Ordered, read-only list of service identities.

    Produced by group projections. Being a tuple, it cannot be changed
    after creation.
    """

    __slots__ = ()

    def names(self) -> list[str]:
        """Service name of each entry, in order."""
        return [n.name for n in self]

    def namespaced_names(self) -> list[str]:
        """Dotted ``name.namespace`` form of each entry, in order."""
        return [f"{n.name}.{n.namespace}" for n in self]
