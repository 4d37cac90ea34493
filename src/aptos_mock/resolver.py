"""Transitive dependency resolution over the on-chain package graph."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import httpx

from aptos_mock.constants import FRAMEWORK_ADDRESSES
from aptos_mock.errors import AptosMockError
from aptos_mock.registry import find_package_registry
from aptos_mock.rpc import AptosRpcClient
from aptos_mock.schema import DependencySet, PackageDep, PackageIdentity

logger = logging.getLogger(__name__)


def is_framework_address(account: str) -> bool:
    return account in FRAMEWORK_ADDRESSES


def declared_dependencies(client: AptosRpcClient, account: str, package_name: str) -> tuple[PackageDep, ...]:
    """
    Dependency edges of one package, in on-chain order.

    Any failure to read the package (transport error, missing registry,
    missing package) is logged and yields no edges.
    """
    try:
        resources = client.fetch_resources(account)
    except (AptosMockError, httpx.HTTPError) as e:
        logger.error(f"Error collecting dependencies for {package_name} ({account}): {e}")
        return ()

    registry = find_package_registry(resources)
    if registry is None:
        logger.warning(f"No PackageRegistry for account {account}; skipping dependencies of {package_name}")
        return ()
    record = registry.find(package_name)
    if record is None:
        logger.warning(f"Package {package_name} not found in account {account}; skipping its dependencies")
        return ()
    return record.deps


def resolve_dependencies(
    client: AptosRpcClient,
    account: str,
    package_name: str,
    deps: DependencySet | None = None,
) -> DependencySet:
    """
    Collect every non-framework package reachable from (account, package_name).

    Walks the graph depth-first with an explicit stack of edge iterators, so
    the result is in the same first-discovered order a recursive walk would
    give. A dependency is recorded before its own edges are visited, which
    makes cycles terminate. The root itself is never recorded.

    Args:
        client: RPC client (only `fetch_resources` is used).
        account: Account that published the root package.
        package_name: Root package name.
        deps: Optional accumulator to extend; identities already in it are
            not expanded again.

    Returns:
        The accumulator, mapping each identity to its dependency edge.
    """
    deps = {} if deps is None else deps
    root = PackageIdentity(account, package_name)

    stack: list[Iterator[PackageDep]] = [iter(declared_dependencies(client, account, package_name))]
    while stack:
        dep = next(stack[-1], None)
        if dep is None:
            stack.pop()
            continue
        if is_framework_address(dep.account):
            continue
        identity = dep.identity()
        if identity == root or identity in deps:
            continue
        deps[identity] = dep
        logger.debug(f"Discovered dependency {identity}")
        stack.append(iter(declared_dependencies(client, dep.account, dep.package_name)))
    return deps
