"""Service groups - ordered collections of deployed services.

A group holds Targets that may belong to many different services, each
identified by its cluster-local FQDN. Test cases use groups to pick the
deployments they talk to and to iterate over them in a deterministic
order, so generated test names stay stable between runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload

from ..domain.exceptions import InvalidTargetError
from ..domain.value_objects import NamespacedName, ServiceNameList
from ..ports.logger import LoggerPort
from ..ports.target import Instance, Target


def _fqdn_key(target: Target) -> str:
    return target.cluster_local_fqdn()


class ServiceGroup(Sequence[Target]):
    """Immutable, ordered sequence of Targets.

    Order is insertion order unless the group was produced by
    ``sorted_by_fqdn`` or ``append``. FQDNs are expected to be unique
    within a group but duplicates are kept as given.

    Every operation leaves the receiver untouched; operations that change
    the membership or the order return a new group that shares the same
    Target handles and logger.
    """

    __slots__ = ("_logger", "_targets")

    def __init__(self, targets: Iterable[Target] = (), logger: LoggerPort | None = None):
        """Initialize the group.

        Args:
            targets: Deployments in the desired order
            logger: Optional logger for diagnostics

        Raises:
            InvalidTargetError: If an element does not implement Target
        """
        items = tuple(targets)
        for position, target in enumerate(items):
            if not isinstance(target, Target):
                raise InvalidTargetError(target, position)
        self._targets = items
        self._logger = logger

    def _derive(self, targets: Iterable[Target]) -> ServiceGroup:
        return ServiceGroup(targets, logger=self._logger)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._targets)

    @overload
    def __getitem__(self, index: int) -> Target: ...

    @overload
    def __getitem__(self, index: slice) -> ServiceGroup: ...

    def __getitem__(self, index: int | slice) -> Target | ServiceGroup:
        if isinstance(index, slice):
            return self._derive(self._targets[index])
        return self._targets[index]

    def __iter__(self) -> Iterator[Target]:
        return iter(self._targets)

    def __contains__(self, value: object) -> bool:
        return any(target is value for target in self._targets)

    def __eq__(self, other: Any) -> bool:
        """Groups are equal when they hold the same handles in the same order."""
        if not isinstance(other, ServiceGroup):
            return NotImplemented
        return len(self) == len(other) and all(
            a is b for a, b in zip(self._targets, other._targets, strict=True)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ServiceGroup({self.fqdns()!r})"

    # Lookups

    def find_by_service_name(self, name: str) -> Target | None:
        """Find the first deployment with the given short service name.

        Several deployments may share a service name in different
        namespaces. The first one in the current order wins; use
        ``find_by_namespaced_name`` when the namespace matters.

        Args:
            name: Short service name

        Returns:
            The matching Target or None if there is none
        """
        matches = [t for t in self._targets if t.config().service == name]
        if not matches:
            return None
        if len(matches) > 1 and self._logger:
            self._logger.debug(
                f"Service name '{name}' is ambiguous, using first match",
                service=name,
                fqdns=[t.cluster_local_fqdn() for t in matches],
            )
        return matches[0]

    def find_by_namespaced_name(self, name: NamespacedName) -> Target | None:
        """Find the first deployment with the given identity."""
        for target in self._targets:
            if target.namespaced_name() == name:
                return target
        return None

    def find_by_fqdn(self, fqdn: str) -> Target | None:
        """Find the first deployment with the given cluster-local FQDN."""
        for target in self._targets:
            if target.cluster_local_fqdn() == fqdn:
                return target
        return None

    # Projections

    def service_names(self) -> ServiceNameList:
        """Identity of each deployment, in order."""
        return ServiceNameList(t.namespaced_name() for t in self._targets)

    def service_names_with_namespace_prefix(self) -> ServiceNameList:
        """Like ``service_names`` but with namespace prefixes instead of full names.

        Useful for test names and logs, where generated namespace suffixes
        would only add noise.
        """
        return ServiceNameList(t.config().namespaced_name_with_prefix() for t in self._targets)

    def fqdns(self) -> list[str]:
        """Cluster-local FQDN of each deployment, in order."""
        return [t.cluster_local_fqdn() for t in self._targets]

    def instances(self) -> list[Instance]:
        """All runtime instances, in deployment order then instance order."""
        out: list[Instance] = []
        for target in self._targets:
            out.extend(target.instances())
        return out

    # Derived groups

    def match_fqdns(self, *fqdns: str) -> ServiceGroup:
        """Keep only the deployments whose FQDN is one of ``fqdns``.

        Order is preserved. Repeated keys have no extra effect.
        """
        match = set(fqdns)
        return self._derive(t for t in self._targets if t.cluster_local_fqdn() in match)

    def sorted_by_fqdn(self) -> ServiceGroup:
        """Return a copy stably sorted by FQDN."""
        return self._derive(sorted(self._targets, key=_fqdn_key))

    def is_sorted_by_fqdn(self) -> bool:
        """Check whether the current order is ascending by FQDN."""
        fqdns = self.fqdns()
        return all(a <= b for a, b in zip(fqdns, fqdns[1:]))

    def copy(self) -> ServiceGroup:
        """Return a new group holding the same Target handles."""
        return self._derive(self._targets)

    def append(self, *others: Iterable[Target]) -> ServiceGroup:
        """Concatenate this group with ``others`` and sort the result by FQDN.

        The sort is stable, so deployments with equal FQDNs keep the order
        in which they were concatenated.

        Args:
            others: Groups or other iterables of Targets

        Returns:
            A new sorted group

        Raises:
            InvalidTargetError: If an appended element does not implement Target
        """
        out = list(self._targets)
        for other in others:
            out.extend(other)
        group = self._derive(out).sorted_by_fqdn()
        if self._logger:
            self._logger.debug(
                f"Appended {len(group) - len(self)} deployments to group",
                size=len(group),
            )
            fqdns = group.fqdns()
            duplicates = sorted({f for f, g in zip(fqdns, fqdns[1:]) if f == g})
            if duplicates:
                self._logger.warning(
                    "Appended group has duplicate FQDNs",
                    fqdns=duplicates,
                )
        return group
