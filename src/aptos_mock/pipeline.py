from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from rich.progress import track

from aptos_mock.constants import DEPS_DIRNAME
from aptos_mock.manifest import qualified_name
from aptos_mock.materialize import materialize_package
from aptos_mock.resolver import resolve_dependencies
from aptos_mock.rpc import AptosRpcClient
from aptos_mock.schema import DependencySet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MockResult:
    root_dir: Path
    dependencies: DependencySet

    @property
    def deps_dir(self) -> Path:
        return self.root_dir / DEPS_DIRNAME


def create_mock_package(
    client: AptosRpcClient,
    account: str,
    package_name: str,
    target_dir: Path,
    *,
    show_progress: bool = False,
) -> MockResult:
    """
    Mock `package_name` and all of its dependencies under `target_dir/package_name`.

    The root directory is removed first. Dependencies are written flat into
    `deps/<package>_<account>`, in resolution order. The first failing package
    aborts the run; whatever was written before it stays on disk.
    """
    root_dir = target_dir / package_name
    if root_dir.exists():
        logger.info(f"Removing existing output directory: {root_dir}")
        shutil.rmtree(root_dir)

    deps = resolve_dependencies(client, account, package_name)
    logger.info(f"Collected {len(deps)} unique dependencies")

    materialize_package(client, account, package_name, root_dir, is_root=True)

    deps_dir = root_dir / DEPS_DIRNAME
    deps_dir.mkdir(parents=True, exist_ok=True)
    for dep in track(list(deps.values()), description="dependencies", disable=not show_progress):
        dep_dir = deps_dir / qualified_name(dep.package_name, dep.account)
        materialize_package(client, dep.account, dep.package_name, dep_dir, is_root=False)

    return MockResult(root_dir=root_dir, dependencies=deps)
