"""Configuration for the echo deployment helpers."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.exceptions import ConfigurationError
from ..domain.models import DEFAULT_CLUSTER_DOMAIN, ServiceConfig, normalize_domain
from ..domain.value_objects import Namespace
from .simple_logger import SimpleLogger

DOMAIN_ENV_VAR = "ECHO_CLUSTER_DOMAIN"
LOG_LEVEL_ENV_VAR = "ECHO_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EchoFrameworkConfig(BaseModel):
    """Settings shared by every group built during a test run."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
    )

    domain: str = Field(
        default=DEFAULT_CLUSTER_DOMAIN,
        min_length=1,
        description="Cluster DNS domain used to build FQDNs",
    )
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in LOG_LEVELS:
                raise ValueError(f"Invalid log level '{v}'. Must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Normalize the cluster domain."""
        return normalize_domain(v)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EchoFrameworkConfig:
        """Load configuration from environment variables.

        Args:
            environ: Mapping to read from (default: ``os.environ``)

        Returns:
            The loaded configuration; unset variables keep their defaults

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        sources = {"domain": DOMAIN_ENV_VAR, "log_level": LOG_LEVEL_ENV_VAR}
        for field, variable in sources.items():
            raw = env.get(variable)
            if raw:
                values[field] = raw

        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else ""
            raise ConfigurationError(
                f"Invalid echo configuration: {error['msg']}",
                variable=sources.get(field),
            ) from e

    def create_logger(self, name: str = "echo_deployments") -> SimpleLogger:
        """Build a logger at the configured level."""
        return SimpleLogger(name=name, level=getattr(logging, self.log_level))

    def service_config(self, service: str, namespace: Namespace | str) -> ServiceConfig:
        """Build a ServiceConfig in the configured cluster domain.

        Args:
            service: Short service name
            namespace: Namespace object or full namespace name
        """
        if isinstance(namespace, str):
            namespace = Namespace(name=namespace)
        return ServiceConfig(service=service, namespace=namespace, domain=self.domain)
