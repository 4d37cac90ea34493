from __future__ import annotations

from collections.abc import Iterable

from aptos_mock.errors import PackageNotFoundError, PackageRegistryNotFoundError
from aptos_mock.schema import PackageRecord, PackageRegistry, Resource


def find_package_registry(resources: Iterable[Resource]) -> PackageRegistry | None:
    """Return the account's package registry, or None if it has no packages."""
    for resource in resources:
        if resource.is_package_registry:
            return resource.registry
    return None


def find_package(resources: Iterable[Resource], package_name: str) -> PackageRecord | None:
    registry = find_package_registry(resources)
    if registry is None:
        return None
    return registry.find(package_name)


def require_package(resources: Iterable[Resource], account: str, package_name: str) -> PackageRecord:
    registry = find_package_registry(resources)
    if registry is None:
        raise PackageRegistryNotFoundError(account)
    record = registry.find(package_name)
    if record is None:
        raise PackageNotFoundError(account, package_name)
    return record
