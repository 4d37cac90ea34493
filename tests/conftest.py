"""
Shared pytest fixtures and utilities for aptos-mock tests.

This module provides:
- JSON builders shaped like the Aptos REST API responses
- An in-memory client standing in for AptosRpcClient
"""

from __future__ import annotations

from typing import Any

import pytest

from aptos_mock.errors import RpcStatusError
from aptos_mock.schema import ModuleAbi, Resource

# ---------------------------------------------------------------------------
# JSON builders
# ---------------------------------------------------------------------------


def package_json(
    name: str,
    deps: list[tuple[str, str]] | None = None,
    modules: list[str] | None = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "deps": [{"account": a, "package_name": p} for a, p in (deps or [])],
        "modules": [{"name": m, "source": "0x", "source_map": "0x", "extension": {"vec": []}} for m in (modules or [])],
        "extension": {"vec": []},
        "manifest": "0x",
        "source_digest": "ABCDEF",
        "upgrade_number": "0",
        "upgrade_policy": {"policy": 1},
    }


def registry_resource_json(packages: list[dict[str, Any]]) -> dict[str, Any]:
    return {"type": "0x1::code::PackageRegistry", "data": {"packages": packages}}


def account_resource_json() -> dict[str, Any]:
    return {
        "type": "0x1::account::Account",
        "data": {"authentication_key": "0x00", "sequence_number": "3", "guid_creation_num": "4"},
    }


def module_abi_json(address: str, name: str, *, structs=None, functions=None) -> dict[str, Any]:
    return {
        "address": address,
        "name": name,
        "friends": [],
        "exposed_functions": functions or [],
        "structs": structs or [],
    }


# ---------------------------------------------------------------------------
# Fake RPC client
# ---------------------------------------------------------------------------


class FakeAptosClient:
    """
    In-memory replacement for AptosRpcClient.

    `packages` maps account -> list of package JSON objects. Accounts not in
    the map have resources but no registry. Accounts in `failing_accounts`
    answer every request with HTTP 500.
    """

    def __init__(
        self,
        packages: dict[str, list[dict[str, Any]]],
        abis: dict[tuple[str, str], dict[str, Any]] | None = None,
        failing_accounts: set[str] | None = None,
    ) -> None:
        self.packages = packages
        self.abis = abis or {}
        self.failing_accounts = failing_accounts or set()
        self.resource_calls: list[str] = []
        self.abi_calls: list[tuple[str, str]] = []

    def __enter__(self) -> FakeAptosClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        pass

    def fetch_resources(self, account: str) -> list[Resource]:
        self.resource_calls.append(account)
        if account in self.failing_accounts:
            raise RpcStatusError(500, f"https://test.rpc/v1/accounts/{account}/resources")
        items = [account_resource_json()]
        if account in self.packages:
            items.append(registry_resource_json(self.packages[account]))
        return [Resource.from_json(item) for item in items]

    def fetch_module_abi(self, account: str, module: str) -> ModuleAbi:
        self.abi_calls.append((account, module))
        if account in self.failing_accounts:
            raise RpcStatusError(500, f"https://test.rpc/v1/accounts/{account}/module/{module}")
        abi = self.abis.get((account, module)) or module_abi_json(account, module)
        return ModuleAbi.from_json(abi)


def graph_client(edges: dict[tuple[str, str], list[tuple[str, str]]], **kwargs: Any) -> FakeAptosClient:
    """Build a fake client from {(account, package): [(dep_account, dep_package), ...]}."""
    packages: dict[str, list[dict[str, Any]]] = {}
    for (account, name), deps in edges.items():
        packages.setdefault(account, []).append(package_json(name, deps=deps, modules=[name.lower()]))
    return FakeAptosClient(packages, **kwargs)


@pytest.fixture
def cyclic_client() -> FakeAptosClient:
    """P (0xa) -> Q (0xb) -> [R (0xc), P (0xa)]."""
    return graph_client(
        {
            ("0xa", "P"): [("0x1", "AptosFramework"), ("0xb", "Q")],
            ("0xb", "Q"): [("0xc", "R"), ("0xa", "P")],
            ("0xc", "R"): [("0x1", "MoveStdlib")],
        }
    )
