"""Move.toml rendering for mocked packages."""

from __future__ import annotations

from aptos_mock.constants import (
    DEFAULT_FRAMEWORK_SUBDIR,
    DEPS_DIRNAME,
    FRAMEWORK_GIT_URL,
    FRAMEWORK_REV,
    FRAMEWORK_SUBDIRS,
    MANIFEST_VERSION,
)
from aptos_mock.resolver import is_framework_address
from aptos_mock.schema import PackageDep, PackageRecord


def strip_hex_prefix(account: str) -> str:
    return account[2:] if account.startswith("0x") else account


def qualified_name(package_name: str, account: str) -> str:
    """
    Folder name for a dependency: `<package>_<account without 0x>`.

    Two accounts may publish packages with the same name; the account suffix
    keeps them apart in the flat deps/ directory.
    """
    return f"{package_name}_{strip_hex_prefix(account)}"


def framework_subdir(package_name: str) -> str:
    # Unknown framework packages fall back to aptos-framework.
    return FRAMEWORK_SUBDIRS.get(package_name, DEFAULT_FRAMEWORK_SUBDIR)


def render_dependency(dep: PackageDep, *, is_root: bool) -> str:
    if is_framework_address(dep.account):
        return (
            f'{dep.package_name} = {{ git = "{FRAMEWORK_GIT_URL}", rev = "{FRAMEWORK_REV}", '
            f'subdir = "{framework_subdir(dep.package_name)}"}}'
        )
    folder = qualified_name(dep.package_name, dep.account)
    if is_root:
        return f'{dep.package_name} = {{ local = "{DEPS_DIRNAME}/{folder}" }}'
    return f'{dep.package_name} = {{ local = "../{folder}" }}'


def render_manifest(package_name: str, account: str, record: PackageRecord, *, is_root: bool) -> str:
    """
    Render the Move.toml for one package.

    The root package points at its dependencies under deps/; a dependency
    lives inside deps/ itself and so points at its siblings with ../.
    `account` is not written; the [package] section only carries the name.
    """
    deps = "\n".join(render_dependency(dep, is_root=is_root) for dep in record.deps)
    return (
        "[package]\n"
        f'name = "{package_name}"\n'
        f'version = "{MANIFEST_VERSION}"\n'
        "authors = []\n"
        "\n"
        "[dev-addresses]\n"
        "\n"
        "[dependencies]\n"
        f"{deps}\n"
        "\n"
        "[dev-dependencies]"
    )
