from __future__ import annotations

import logging
from pathlib import Path

import httpx

from aptos_mock.constants import MANIFEST_FILENAME, SOURCE_EXTENSION, SOURCES_DIRNAME
from aptos_mock.errors import AptosMockError
from aptos_mock.manifest import qualified_name, render_manifest
from aptos_mock.registry import require_package
from aptos_mock.render import render_module
from aptos_mock.rpc import AptosRpcClient
from aptos_mock.schema import ModuleRef

logger = logging.getLogger(__name__)


def write_module_sources(
    client: AptosRpcClient, account: str, modules: tuple[ModuleRef, ...], sources_dir: Path
) -> list[Path]:
    written: list[Path] = []
    for module in modules:
        abi = client.fetch_module_abi(account, module.name)
        path = sources_dir / f"{module.name}{SOURCE_EXTENSION}"
        path.write_text(render_module(abi), encoding="utf-8")
        logger.info(f"Wrote module: {path}")
        written.append(path)
    return written


def materialize_package(
    client: AptosRpcClient,
    account: str,
    package_name: str,
    output_dir: Path,
    *,
    is_root: bool,
) -> Path:
    """
    Write a mock of one package to `output_dir`.

    Layout:
      <output_dir>/sources/<module>.move   one per module in the package record
      <output_dir>/Move.toml

    Existing files are overwritten but nothing is removed first. A missing
    registry or package is an error here, unlike during resolution.

    Returns:
        Path to the written Move.toml.

    Raises:
        AptosMockError: missing package/registry or bad RPC response.
        httpx.HTTPError: transport failure.
        OSError: directory or file write failure.
    """
    logger.info(f"Downloading package: {qualified_name(package_name, account)} from account: {account}")
    try:
        record = require_package(client.fetch_resources(account), account, package_name)

        sources_dir = output_dir / SOURCES_DIRNAME
        sources_dir.mkdir(parents=True, exist_ok=True)
        write_module_sources(client, account, record.modules, sources_dir)

        manifest_path = output_dir / MANIFEST_FILENAME
        manifest_path.write_text(render_manifest(package_name, account, record, is_root=is_root), encoding="utf-8")
        logger.info(f"Wrote manifest: {manifest_path}")
    except (AptosMockError, httpx.HTTPError, OSError) as e:
        logger.error(f"Error downloading package {package_name} ({account}): {e}")
        raise
    return manifest_path
