"""Typed records parsed from the Aptos REST API.

Only the parts of the JSON this tool consumes are modelled. Constructors raise
KeyError/TypeError/ValueError on unexpected shapes; the RPC client turns those
into MalformedResponseError with the request URL attached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aptos_mock.constants import PACKAGE_REGISTRY_TYPE

UPGRADE_POLICY_NAMES = {0: "arbitrary", 1: "compatible", 2: "immutable"}


def _as_list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise TypeError(f"{what}: expected list, got {type(value).__name__}")
    return value


def _as_str_tuple(value: Any, what: str) -> tuple[str, ...]:
    items = _as_list(value, what)
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"{what}: expected strings, got {type(item).__name__}")
    return tuple(items)


def _generic_constraints(value: Any, what: str) -> tuple[tuple[str, ...], ...]:
    # Each entry is {"constraints": [...]} (structs add "is_phantom").
    out = []
    for param in _as_list(value, what):
        constraints = param.get("constraints", []) if isinstance(param, dict) else []
        out.append(_as_str_tuple(constraints, f"{what}.constraints"))
    return tuple(out)


# ---------------------------------------------------------------------------
# Package registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PackageIdentity:
    account: str
    package_name: str

    @property
    def key(self) -> str:
        return f"{self.account}::{self.package_name}"

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class PackageDep:
    account: str
    package_name: str

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> PackageDep:
        return cls(account=str(obj["account"]), package_name=str(obj["package_name"]))

    def identity(self) -> PackageIdentity:
        return PackageIdentity(self.account, self.package_name)


@dataclass(frozen=True)
class ModuleRef:
    name: str

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> ModuleRef:
        return cls(name=str(obj["name"]))


@dataclass(frozen=True)
class PackageRecord:
    name: str
    deps: tuple[PackageDep, ...]
    modules: tuple[ModuleRef, ...]
    upgrade_policy: int = 1
    upgrade_number: int = 0
    source_digest: str = ""

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> PackageRecord:
        policy = obj.get("upgrade_policy") or {}
        return cls(
            name=str(obj["name"]),
            deps=tuple(PackageDep.from_json(d) for d in _as_list(obj.get("deps", []), "deps")),
            modules=tuple(ModuleRef.from_json(m) for m in _as_list(obj.get("modules", []), "modules")),
            upgrade_policy=int(policy.get("policy", 1)),
            upgrade_number=int(obj.get("upgrade_number", 0)),
            source_digest=str(obj.get("source_digest", "")),
        )

    @property
    def upgrade_policy_name(self) -> str:
        return UPGRADE_POLICY_NAMES.get(self.upgrade_policy, f"unknown({self.upgrade_policy})")


@dataclass(frozen=True)
class PackageRegistry:
    packages: tuple[PackageRecord, ...]

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> PackageRegistry:
        return cls(packages=tuple(PackageRecord.from_json(p) for p in _as_list(data["packages"], "packages")))

    def find(self, package_name: str) -> PackageRecord | None:
        for pkg in self.packages:
            if pkg.name == package_name:
                return pkg
        return None


@dataclass(frozen=True)
class Resource:
    """
    One on-chain resource, tagged by its fully qualified type string.

    The payload is kept opaque; only the package registry variant is parsed,
    eagerly, so malformed registries fail at fetch time.
    """

    type: str
    data: dict[str, Any]
    registry: PackageRegistry | None = None

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> Resource:
        type_ = str(obj["type"])
        data = obj.get("data")
        data = data if isinstance(data, dict) else {}
        registry = None
        if type_ == PACKAGE_REGISTRY_TYPE and data.get("packages"):
            registry = PackageRegistry.from_json(data)
        return cls(type=type_, data=data, registry=registry)

    @property
    def is_package_registry(self) -> bool:
        return self.type == PACKAGE_REGISTRY_TYPE


# Flattened result of dependency resolution, in first-discovered order.
DependencySet = dict[PackageIdentity, PackageDep]


# ---------------------------------------------------------------------------
# Module ABI
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StructField:
    name: str
    type: str


@dataclass(frozen=True)
class StructAbi:
    name: str
    abilities: tuple[str, ...]
    generic_type_params: tuple[tuple[str, ...], ...]
    fields: tuple[StructField, ...]
    is_native: bool = False
    is_event: bool = False

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> StructAbi:
        return cls(
            name=str(obj["name"]),
            abilities=_as_str_tuple(obj.get("abilities", []), "abilities"),
            generic_type_params=_generic_constraints(obj.get("generic_type_params", []), "generic_type_params"),
            fields=tuple(
                StructField(name=str(f["name"]), type=str(f["type"]))
                for f in _as_list(obj.get("fields", []), "fields")
            ),
            is_native=bool(obj.get("is_native", False)),
            is_event=bool(obj.get("is_event", False)),
        )


@dataclass(frozen=True)
class FunctionAbi:
    name: str
    visibility: str
    is_entry: bool
    is_view: bool
    generic_type_params: tuple[tuple[str, ...], ...]
    params: tuple[str, ...]
    return_types: tuple[str, ...]

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> FunctionAbi:
        return cls(
            name=str(obj["name"]),
            visibility=str(obj.get("visibility", "private")),
            is_entry=bool(obj.get("is_entry", False)),
            is_view=bool(obj.get("is_view", False)),
            generic_type_params=_generic_constraints(obj.get("generic_type_params", []), "generic_type_params"),
            params=_as_str_tuple(obj.get("params", []), "params"),
            return_types=_as_str_tuple(obj.get("return", []), "return"),
        )

    @property
    def is_public(self) -> bool:
        # "friend" and "private" both collapse to non-public.
        return self.visibility == "public"


@dataclass(frozen=True)
class ModuleAbi:
    address: str
    name: str
    friends: tuple[str, ...]
    exposed_functions: tuple[FunctionAbi, ...]
    structs: tuple[StructAbi, ...]

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> ModuleAbi:
        return cls(
            address=str(obj["address"]),
            name=str(obj["name"]),
            friends=_as_str_tuple(obj.get("friends", []), "friends"),
            exposed_functions=tuple(
                FunctionAbi.from_json(f) for f in _as_list(obj.get("exposed_functions", []), "exposed_functions")
            ),
            structs=tuple(StructAbi.from_json(s) for s in _as_list(obj.get("structs", []), "structs")),
        )
